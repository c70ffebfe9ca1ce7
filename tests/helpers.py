# tests/helpers.py
"""Request helpers shared by the API tests."""

from typing import Any

from httpx import AsyncClient


async def register(
    client: AsyncClient,
    username: str,
    password: str,
    name: str | None = None,
) -> dict[str, Any]:
    """Register a user through the API and return the response body."""
    response = await client.post(
        "/api/users",
        json={"username": username, "name": name or username.title(), "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()


async def login(client: AsyncClient, username: str, password: str) -> str:
    """Log in through the API and return the bearer token."""
    response = await client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def blogs_in_db(client: AsyncClient) -> list[dict[str, Any]]:
    response = await client.get("/api/blogs")
    assert response.status_code == 200
    return response.json()


async def users_in_db(client: AsyncClient) -> list[dict[str, Any]]:
    response = await client.get("/api/users")
    assert response.status_code == 200
    return response.json()

# tests/routes/test_login.py
"""Tests for POST /api/login."""

from typing import Any

from httpx import AsyncClient
from jose import jwt

from app.configs import Settings
from tests.helpers import bearer


class TestLogin:
    """Tests for the login endpoint."""

    async def test_valid_credentials_return_token(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
        settings: Settings,
    ) -> None:
        response = await client.post("/api/login", json={"username": "root", "password": "sekret"})

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "root"
        assert body["name"] == "Superuser"

        claims = jwt.decode(
            body["token"],
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
        )
        assert claims["id"] == root_user["id"]
        assert claims["username"] == "root"
        assert claims["exp"] > claims["iat"]

    async def test_issued_token_authorizes_blog_creation(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
    ) -> None:
        login = await client.post("/api/login", json={"username": "root", "password": "sekret"})

        response = await client.post(
            "/api/blogs",
            json={"title": "First class tests"},
            headers=bearer(login.json()["token"]),
        )

        assert response.status_code == 200
        assert response.json()["user"] == root_user["id"]

    async def test_wrong_password_is_401(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
    ) -> None:
        response = await client.post("/api/login", json={"username": "root", "password": "wrong"})

        assert response.status_code == 401
        assert response.json() == {"error": "invalid username or password"}

    async def test_unknown_user_is_401(self, client: AsyncClient) -> None:
        response = await client.post("/api/login", json={"username": "ghost", "password": "boo"})

        assert response.status_code == 401
        assert response.json() == {"error": "invalid username or password"}

    async def test_missing_fields_is_400(self, client: AsyncClient) -> None:
        response = await client.post("/api/login", json={"username": "root"})

        assert response.status_code == 400
        assert "password" in response.json()["error"]

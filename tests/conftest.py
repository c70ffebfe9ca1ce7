# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from pytest import fixture

from app.configs import Settings
from app.db import close_db, drop_db, init_db
from app.main import create_app
from tests.helpers import bearer, login, register

ROOT_USERNAME = "root"
ROOT_PASSWORD = "sekret"

INITIAL_BLOGS: list[dict[str, Any]] = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


@fixture
def settings() -> Settings:
    """Settings for an isolated in-memory database with cheap hashing."""
    return Settings(
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
        LOG_TO_FILE=False,
        DATABASE_URL="sqlite+aiosqlite://",
        SECRET_KEY=SecretStr("test-secret-key"),
        ACCESS_TOKEN_EXPIRE_MINUTES=5,
        ARGON2_MEMORY_COST=1024,
        ARGON2_TIME_COST=1,
        ARGON2_PARALLELISM=1,
    )


@fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI]:
    """Application with a freshly created schema."""
    application = create_app(settings)
    await init_db(application.state.engine)
    yield application
    await drop_db(application.state.engine)
    await close_db(application.state.engine)


@fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app, raise_app_exceptions=False),
    ) as ac:
        yield ac


@fixture
def initial_blogs() -> list[dict[str, Any]]:
    return [dict(blog) for blog in INITIAL_BLOGS]


@fixture
async def root_user(client: AsyncClient) -> dict[str, Any]:
    """The `root` user as returned on registration."""
    return await register(client, ROOT_USERNAME, ROOT_PASSWORD, name="Superuser")


@fixture
async def root_token(client: AsyncClient, root_user: dict[str, Any]) -> str:
    """A bearer token issued to `root`."""
    return await login(client, ROOT_USERNAME, ROOT_PASSWORD)


@fixture
async def seeded_blogs(
    client: AsyncClient,
    root_token: str,
    initial_blogs: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """`INITIAL_BLOGS` created through the API and owned by `root`."""
    created = []
    for blog in initial_blogs:
        response = await client.post("/api/blogs", json=blog, headers=bearer(root_token))
        assert response.status_code == 200, response.text
        created.append(response.json())
    return created

"""User request and response models. Password hashes are never part of a response."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from app.configs.settings import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from app.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """Body of ``POST /api/users``."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=MAX_USERNAME_LENGTH,
        description="Username (unique)",
        examples=["mluukkai"],
    )
    name: str | None = Field(default=None, max_length=200, examples=["Matti Luukkainen"])
    password: SecretStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password",
        examples=["salainen"],
    )


class UserResponse(BaseModel):
    """A registered user with the ids of the blogs they own, in creation order."""

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UUID] = []


class UserListResponse(BaseModel):
    """A user as listed by ``GET /api/users``, with blogs populated."""

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = []

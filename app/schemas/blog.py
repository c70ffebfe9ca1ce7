"""
Blog request and response models.

Request bodies are validated command models: each endpoint declares which
fields are required and which are optional, and unknown keys are rejected
before anything reaches the store.
"""

from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogCreate(BaseModel):
    """Body of ``POST /api/blogs``."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["React patterns"],
    )
    author: str | None = Field(default=None, max_length=200, examples=["Michael Chan"])
    url: str | None = Field(
        default=None,
        max_length=MAX_URL_LENGTH,
        examples=["https://reactpatterns.com/"],
    )
    likes: int = Field(default=0, ge=0, strict=True, description="Defaults to 0")

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, value: Any) -> Any:
        """Treat an explicit ``null`` like an omitted value."""
        return 0 if value is None else value


class BlogUpdate(BaseModel):
    """
    Body of ``PUT /api/blogs/{id}``.

    The update replaces title, author, url and likes wholesale. Clients often
    send back the blog they fetched, so the read-only ``id`` and ``user`` keys
    are accepted and ignored.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    author: str | None = Field(default=None, max_length=200)
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH)
    likes: int = Field(default=0, ge=0, strict=True)
    id: Any = Field(default=None, exclude=True)
    user: Any = Field(default=None, exclude=True)

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, value: Any) -> Any:
        """Treat an explicit ``null`` like an omitted value."""
        return 0 if value is None else value


class BlogResponse(BaseModel):
    """A single blog; ``user`` is the owner's id."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str | None = None
    likes: int = 0
    user: UUID | None = Field(
        default=None,
        validation_alias=AliasChoices("user_id", "user"),
    )


class BlogOwner(BaseModel):
    """Owner fields embedded in blog listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogListResponse(BaseModel):
    """A blog as listed by ``GET /api/blogs``, with its owner populated."""

    id: UUID
    title: str
    author: str | None = None
    url: str | None = None
    likes: int = 0
    user: BlogOwner | None = None


class BlogSummary(BaseModel):
    """Blog fields embedded in user listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str | None = None
    likes: int = 0


class AuthorCountResponse(BaseModel):
    author: str
    blogs: int


class AuthorLikesResponse(BaseModel):
    author: str
    likes: int


class BlogStatsResponse(BaseModel):
    """Aggregates over every stored blog."""

    model_config = ConfigDict(populate_by_name=True)

    total_likes: int = Field(alias="totalLikes")
    favorite_blog: BlogSummary | None = Field(default=None, alias="favoriteBlog")
    most_blogs: AuthorCountResponse | None = Field(default=None, alias="mostBlogs")
    most_likes: AuthorLikesResponse | None = Field(default=None, alias="mostLikes")

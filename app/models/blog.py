"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Integer
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from app.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``user_id`` references the owning user. It is nullable so that blogs
    imported without an owner can still be read, but the authorized create
    path always sets it.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Author name as written on the post",
    )
    url: str | None = Field(
        default=None,
        sa_column=Column(String(MAX_URL_LENGTH)),
        description="Link to the post",
    )
    likes: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Like count",
    )
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
            },
        },
    )

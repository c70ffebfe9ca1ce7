"""Database models for the application."""

from app.models.blog import BlogDB
from app.models.user import UserBlogLink, UserDB

__all__ = ["BlogDB", "UserBlogLink", "UserDB"]

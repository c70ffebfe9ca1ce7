"""Utility helper functions."""

from app.utils.helpers import host, is_well_formed_id, time_taken, today_str
from app.utils.list_helper import (
    AuthorCount,
    AuthorLikes,
    favorite_blog,
    most_blogs,
    most_likes,
    total_likes,
)

__all__ = [
    "AuthorCount",
    "AuthorLikes",
    "favorite_blog",
    "host",
    "is_well_formed_id",
    "most_blogs",
    "most_likes",
    "time_taken",
    "today_str",
    "total_likes",
]

"""
Aggregate helpers over blog lists.

The functions here are pure: they accept any sequence of blog-like records,
either mappings (``{"likes": 3, "author": "..."}``) or objects exposing the
same attributes, and never touch the store.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, NamedTuple, TypeVar

T = TypeVar("T")


class AuthorCount(NamedTuple):
    """Author with the number of blogs they wrote."""

    author: str
    blogs: int


class AuthorLikes(NamedTuple):
    """Author with the total likes their blogs received."""

    author: str
    likes: int


def _field(blog: Any, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def total_likes(blogs: Iterable[Any]) -> int:
    """Return the sum of likes; 0 for an empty sequence."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[T]) -> T | None:
    """
    Return the blog with the most likes.

    Ties go to the first blog encountered with the maximum value.
    Returns ``None`` for an empty sequence.
    """
    favorite: T | None = None
    for blog in blogs:
        if favorite is None or _likes(blog) > _likes(favorite):
            favorite = blog
    return favorite


def _leader(totals: Iterable[tuple[str, int]]) -> tuple[str, int] | None:
    """
    Run per-author running totals through a single left-to-right pass.

    The leader changes only when an author strictly exceeds the current best,
    so the first author to reach the maximum keeps the lead.
    """
    running: dict[str, int] = {}
    best: tuple[str, int] | None = None
    for author, amount in totals:
        running[author] = running.get(author, 0) + amount
        if best is None or running[author] > best[1]:
            best = (author, running[author])
    return best


def most_blogs(blogs: Iterable[Any]) -> AuthorCount | None:
    """
    Return the author with the most blogs and that count.

    Blogs without an author are not counted. Returns ``None`` when no blog
    has an author.
    """
    leader = _leader(
        (author, 1) for blog in blogs if (author := _field(blog, "author"))
    )
    return AuthorCount(*leader) if leader else None


def most_likes(blogs: Iterable[Any]) -> AuthorLikes | None:
    """Return the author whose blogs have the most likes in total."""
    leader = _leader(
        (author, _likes(blog)) for blog in blogs if (author := _field(blog, "author"))
    )
    return AuthorLikes(*leader) if leader else None

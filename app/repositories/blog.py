"""Blog repository for database operations."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.errors.database import DatabaseConnectionError
from app.errors.validation import ValidationError
from app.models import BlogDB, UserBlogLink, UserDB
from app.monitoring import get_logger
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogCreate, BlogUpdate

logger = get_logger(__name__)


def check_blog_fields(title: str | None, likes: int | None) -> None:
    """
    Schema check applied before anything is written.

    Raises:
        ValidationError: If the title is missing or likes is not a
            non-negative integer
    """
    if title is None or not title.strip():
        mssg = "Blog validation failed: title: Path `title` is required."
        raise ValidationError(mssg)
    if likes is not None and (isinstance(likes, bool) or not isinstance(likes, int) or likes < 0):
        mssg = "Blog validation failed: likes: must be a non-negative integer."
        raise ValidationError(mssg)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Deleting a blog also removes it from its owner's blog collection.
    """

    model = BlogDB
    label = "Blog"

    async def get_all(self) -> list[tuple[BlogDB, UserDB | None]]:
        """
        Get every blog with its owner joined in.

        Returns:
            list[tuple[BlogDB, UserDB | None]]: Blogs in store order with
            their owners (``None`` for ownerless blogs)
        """
        try:
            result = await self.session.execute(
                select(BlogDB, UserDB).outerjoin(UserDB, BlogDB.user_id == UserDB.id),
            )
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(detail=f"Failed to list blogs: {e}") from e
        return [(blog, owner) for blog, owner in result.all()]

    async def create(self, blog: BlogCreate, owner_id: UUID | None) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Validated creation command
            owner_id: UUID of the owning user

        Returns:
            BlogDB: Created blog with its store-assigned id

        Raises:
            ValidationError: If required fields are missing
            DatabaseError: For database errors
        """
        check_blog_fields(blog.title, blog.likes)

        db_blog = BlogDB(
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            user_id=owner_id,
        )
        try:
            return await self._add_and_refresh(db_blog)
        except IntegrityError as e:
            raise self._integrity_error(e) from e

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """
        Replace a blog's title, author, url and likes.

        Fields left out of the update are cleared rather than kept. The
        owner is never changed.

        Args:
            blog_id: Blog UUID
            blog_update: Replacement values

        Returns:
            BlogDB | None: Updated blog if found, None otherwise

        Raises:
            ValidationError: If the replacement has no title
        """
        db_blog = await self.get_by_id(blog_id)
        if db_blog is None:
            return None

        check_blog_fields(blog_update.title, blog_update.likes)

        db_blog.title = blog_update.title
        db_blog.author = blog_update.author
        db_blog.url = blog_update.url
        db_blog.likes = blog_update.likes

        try:
            return await self._add_and_refresh(db_blog)
        except IntegrityError as e:
            raise self._integrity_error(e) from e

    async def delete(self, blog_id: UUID) -> bool:
        """
        Delete blog by ID together with its owner's reference to it.

        Args:
            blog_id: Blog UUID

        Returns:
            bool: True if a blog was deleted, False if none existed
        """
        try:
            await self.session.execute(delete(UserBlogLink).where(UserBlogLink.blog_id == blog_id))
            result = await self.session.execute(delete(BlogDB).where(BlogDB.id == blog_id))
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to delete blog: {e}") from e

        deleted = bool(result.rowcount)
        if not deleted:
            logger.info(f"Blog {blog_id} was already absent")
        return deleted

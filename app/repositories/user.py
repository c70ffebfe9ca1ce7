"""User repository for database operations."""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.errors.database import DatabaseConnectionError, DuplicateUsernameError
from app.models import BlogDB, UserBlogLink, UserDB
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Owns the user's ordered blog-reference collection, which lives in the
    ``user_blogs`` link table.
    """

    model = UserDB
    label = "User"

    async def create(self, username: str, name: str | None, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Uniqueness is enforced by the ``users.username`` index, so two
        concurrent registrations of the same name cannot both succeed.

        Args:
            username: Unique username
            name: Display name
            password_hash: Already hashed password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateUsernameError: If username already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(username=username, name=name, password_hash=password_hash)
        try:
            return await self._add_and_refresh(db_user)
        except IntegrityError as e:
            if "username" in self._integrity_message(e).lower():
                raise DuplicateUsernameError(username) from e
            raise self._integrity_error(e) from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(select(UserDB).where(UserDB.username == username))
        return result.scalar_one_or_none()

    async def append_blog_reference(self, user_id: UUID, blog_id: UUID) -> UserDB:
        """
        Append a blog id to the user's blog collection.

        The append is a single insert rather than a read-modify-write of a
        cached list, so concurrent appends for different blogs are all kept.

        Args:
            user_id: Owning user's UUID
            blog_id: Blog UUID to record

        Returns:
            UserDB: The owning user

        Raises:
            RecordNotFoundError: If the user does not exist
            DatabaseError: If the reference cannot be stored
        """
        user = await self.get_or_raise(user_id)
        link = UserBlogLink(user_id=user_id, blog_id=blog_id)
        try:
            await self._add_and_refresh(link)
        except IntegrityError as e:
            raise self._integrity_error(e) from e
        return user

    async def get_blog_ids(self, user_id: UUID) -> list[UUID]:
        """Return the user's blog ids in the order they were appended."""
        result = await self.session.execute(
            select(UserBlogLink.blog_id)
            .where(UserBlogLink.user_id == user_id)
            .order_by(UserBlogLink.position),
        )
        return list(result.scalars().all())

    async def get_all_with_blogs(self) -> list[tuple[UserDB, list[BlogDB]]]:
        """
        Get every user together with their blogs, in append order.

        Returns:
            list[tuple[UserDB, list[BlogDB]]]: Users with populated blogs
        """
        try:
            users = (await self.session.execute(select(UserDB))).scalars().all()
            links = await self.session.execute(
                select(UserBlogLink.user_id, BlogDB)
                .join(BlogDB, BlogDB.id == UserBlogLink.blog_id)
                .order_by(UserBlogLink.position),
            )
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(detail=f"Failed to list users: {e}") from e

        blogs_by_user: defaultdict[UUID, list[BlogDB]] = defaultdict(list)
        for user_id, blog in links.all():
            blogs_by_user[user_id].append(blog)
        return [(user, blogs_by_user[user.id]) for user in users]

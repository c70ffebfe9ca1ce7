"""
Blog mutation service.

A write request moves through ``authenticate -> load owner -> validate ->
persist -> link -> commit``. Any failure ends the request; nothing is
retried. Creating a blog and appending it to the owner's collection are one
unit of work: if the append fails the blog insert is rolled back with it.
"""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from app.auth.permissions import DEFAULT_POLICY, BlogOperation, MutationPolicy
from app.configs import Settings
from app.errors import InvalidSessionError, RecordNotFoundError, TransactionError
from app.managers.token_manager import extract_bearer_token, verify_authorization
from app.models import BlogDB, UserDB
from app.monitoring import get_logger
from app.repositories import BlogRepository, UserRepository
from app.schemas.blog import BlogCreate, BlogUpdate
from app.utils.list_helper import (
    AuthorCount,
    AuthorLikes,
    favorite_blog,
    most_blogs,
    most_likes,
    total_likes,
)

logger = get_logger(__name__)


class BlogService:
    """Orchestrates blog reads and writes over the blog and user repositories."""

    def __init__(
        self,
        blog_repo: BlogRepository,
        user_repo: UserRepository,
        settings: Settings,
        policy: MutationPolicy = DEFAULT_POLICY,
    ) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository bound to the request session
            user_repo: User repository bound to the same session
            settings: Application settings (token secret)
            policy: Which operations need a token and ownership checks
        """
        self.blog_repo = blog_repo
        self.session = blog_repo.session
        self.user_repo = user_repo
        self.settings = settings
        self.policy = policy

    def authenticate(self, operation: BlogOperation, authorization: str | None) -> UUID | None:
        """
        Resolve the caller's identity as far as the policy needs it.

        Returns:
            UUID | None: Verified user id, or None when the operation is open
                and no identity is needed

        Raises:
            MissingTokenError: If the operation needs a token and none was sent
            InvalidTokenError: If the token does not verify
        """
        if self.policy.requires_token(operation):
            return verify_authorization(authorization, self.settings)
        if self.policy.owner_only and extract_bearer_token(authorization):
            return verify_authorization(authorization, self.settings)
        return None

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise TransactionError(detail=f"Failed to commit blog changes: {e}") from e

    async def list_blogs(self) -> list[tuple[BlogDB, UserDB | None]]:
        """Every blog with its owner populated."""
        return await self.blog_repo.get_all()

    async def get_blog(self, blog_id: UUID) -> BlogDB:
        """
        Raises:
            RecordNotFoundError: If no blog has this id
        """
        return await self.blog_repo.get_or_raise(blog_id)

    async def create_blog(self, blog: BlogCreate, authorization: str | None) -> BlogDB:
        """
        Create a blog owned by the token's user.

        Args:
            blog: Validated creation command
            authorization: Raw ``Authorization`` header

        Returns:
            BlogDB: The persisted blog

        Raises:
            MissingTokenError: If no token was sent
            InvalidTokenError: If the token does not verify
            InvalidSessionError: If the token's user no longer exists
            ValidationError: If the title is missing
            DatabaseError: If persisting or linking fails; nothing is kept
        """
        user_id = self.authenticate(BlogOperation.CREATE, authorization)
        owner = await self.user_repo.get_by_id(user_id) if user_id else None
        if owner is None:
            logger.warning(f"Token names unknown user {user_id}")
            raise InvalidSessionError

        try:
            db_blog = await self.blog_repo.create(blog, owner_id=owner.id)
            await self.user_repo.append_blog_reference(owner.id, db_blog.id)
        except Exception:
            await self.session.rollback()
            raise
        await self._commit()

        logger.info(f"Blog {db_blog.id} created by {owner.username}")
        return db_blog

    async def update_blog(
        self,
        blog_id: UUID,
        blog_update: BlogUpdate,
        authorization: str | None,
    ) -> BlogDB:
        """
        Replace a blog's editable fields.

        Raises:
            RecordNotFoundError: If no blog has this id
            ValidationError: If the replacement has no title
        """
        user_id = self.authenticate(BlogOperation.UPDATE, authorization)
        if self.policy.owner_only:
            self.policy.check_owner(await self.blog_repo.get_or_raise(blog_id), user_id)

        db_blog = await self.blog_repo.update(blog_id, blog_update)
        if db_blog is None:
            raise RecordNotFoundError(detail=f"Blog {blog_id} not found")
        await self._commit()
        return db_blog

    async def delete_blog(self, blog_id: UUID, authorization: str | None) -> None:
        """
        Delete a blog. Deleting an id that does not exist is not an error.
        """
        user_id = self.authenticate(BlogOperation.DELETE, authorization)
        if self.policy.owner_only and (db_blog := await self.blog_repo.get_by_id(blog_id)):
            self.policy.check_owner(db_blog, user_id)

        await self.blog_repo.delete(blog_id)
        await self._commit()

    async def stats(self) -> tuple[int, BlogDB | None, AuthorCount | None, AuthorLikes | None]:
        """Aggregates over every stored blog."""
        blogs = [blog for blog, _ in await self.blog_repo.get_all()]
        return total_likes(blogs), favorite_blog(blogs), most_blogs(blogs), most_likes(blogs)

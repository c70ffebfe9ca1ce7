"""Tests for the user and blog repositories against an in-memory database."""

from collections.abc import AsyncGenerator
from uuid import uuid4

from fastapi import FastAPI
from pytest import fixture, raises
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import DuplicateUsernameError, RecordNotFoundError, ValidationError
from app.models import UserDB
from app.repositories import BlogRepository, UserRepository
from app.schemas import BlogCreate, BlogUpdate


@fixture
async def session(app: FastAPI) -> AsyncGenerator[AsyncSession]:
    async with app.state.session_maker() as db_session:
        yield db_session


@fixture
async def owner(session: AsyncSession) -> UserDB:
    user = await UserRepository(session).create("owner", "Owner", "not-a-real-hash")
    await session.commit()
    return user


class TestUserRepository:
    """Tests for UserRepository."""

    async def test_create_and_get_by_username(self, session: AsyncSession, owner: UserDB) -> None:
        repo = UserRepository(session)

        found = await repo.get_by_username("owner")

        assert found is not None
        assert found.id == owner.id
        assert await repo.get_by_username("nobody") is None

    async def test_duplicate_username_raises(self, session: AsyncSession, owner: UserDB) -> None:
        repo = UserRepository(session)

        with raises(DuplicateUsernameError) as exc_info:
            await repo.create("owner", "Imposter", "hash")

        assert exc_info.value.status_code == 400
        assert exc_info.value.username == "owner"
        assert await repo.count() == 1

    async def test_append_keeps_order(self, session: AsyncSession, owner: UserDB) -> None:
        """Blog references are listed in the order they were appended."""
        blog_repo = BlogRepository(session)
        user_repo = UserRepository(session)
        created = []
        for title in ("first", "second", "third"):
            blog = await blog_repo.create(BlogCreate(title=title), owner_id=owner.id)
            await user_repo.append_blog_reference(owner.id, blog.id)
            created.append(blog.id)
        await session.commit()

        assert await user_repo.get_blog_ids(owner.id) == created

    async def test_append_to_missing_user_raises(self, session: AsyncSession) -> None:
        with raises(RecordNotFoundError):
            await UserRepository(session).append_blog_reference(uuid4(), uuid4())

    async def test_get_all_with_blogs(self, session: AsyncSession, owner: UserDB) -> None:
        blog_repo = BlogRepository(session)
        user_repo = UserRepository(session)
        blog = await blog_repo.create(BlogCreate(title="mine"), owner_id=owner.id)
        await user_repo.append_blog_reference(owner.id, blog.id)
        await user_repo.create("empty", None, "hash")
        await session.commit()

        users = {user.username: blogs for user, blogs in await user_repo.get_all_with_blogs()}

        assert [b.title for b in users["owner"]] == ["mine"]
        assert users["empty"] == []


class TestBlogRepository:
    """Tests for BlogRepository."""

    async def test_create_sets_owner_and_default_likes(
        self,
        session: AsyncSession,
        owner: UserDB,
    ) -> None:
        blog = await BlogRepository(session).create(BlogCreate(title="Type wars"), owner.id)

        assert blog.likes == 0
        assert blog.user_id == owner.id

    async def test_get_all_joins_owner(self, session: AsyncSession, owner: UserDB) -> None:
        repo = BlogRepository(session)
        await repo.create(BlogCreate(title="owned"), owner.id)
        await repo.create(BlogCreate(title="orphan"), None)
        await session.commit()

        owners = {blog.title: user for blog, user in await repo.get_all()}

        assert owners["owned"] is not None
        assert owners["owned"].username == "owner"
        assert owners["orphan"] is None

    async def test_update_missing_returns_none(self, session: AsyncSession) -> None:
        assert await BlogRepository(session).update(uuid4(), BlogUpdate(title="x")) is None

    async def test_update_without_title_raises(self, session: AsyncSession, owner: UserDB) -> None:
        repo = BlogRepository(session)
        blog = await repo.create(BlogCreate(title="Type wars"), owner.id)

        with raises(ValidationError, match="title"):
            await repo.update(blog.id, BlogUpdate(author="x"))

    async def test_update_missing_is_checked_before_title(self, session: AsyncSession) -> None:
        assert await BlogRepository(session).update(uuid4(), BlogUpdate(author="x")) is None

    async def test_delete_reports_whether_blog_existed(
        self,
        session: AsyncSession,
        owner: UserDB,
    ) -> None:
        blog_repo = BlogRepository(session)
        user_repo = UserRepository(session)
        blog = await blog_repo.create(BlogCreate(title="short lived"), owner.id)
        await user_repo.append_blog_reference(owner.id, blog.id)
        await session.commit()

        assert await blog_repo.delete(blog.id) is True
        assert await blog_repo.delete(blog.id) is False
        await session.commit()

        assert await blog_repo.count() == 0
        assert await user_repo.get_blog_ids(owner.id) == []

"""Tests for the blog mutation policy."""

from uuid import uuid4

from pytest import raises

from app.auth.permissions import DEFAULT_POLICY, BlogOperation, MutationPolicy
from app.errors import ForbiddenError
from app.models import BlogDB


class TestMutationPolicy:
    """Tests for MutationPolicy."""

    def test_default_policy_only_gates_create(self) -> None:
        assert DEFAULT_POLICY.requires_token(BlogOperation.CREATE)
        assert not DEFAULT_POLICY.requires_token(BlogOperation.UPDATE)
        assert not DEFAULT_POLICY.requires_token(BlogOperation.DELETE)
        assert not DEFAULT_POLICY.owner_only

    def test_default_policy_never_checks_owner(self) -> None:
        blog = BlogDB(title="Type wars", user_id=uuid4())

        DEFAULT_POLICY.check_owner(blog, uuid4())

    def test_owner_only_rejects_other_users(self) -> None:
        policy = MutationPolicy(token_required=frozenset(BlogOperation), owner_only=True)
        blog = BlogDB(title="Type wars", user_id=uuid4())

        with raises(ForbiddenError) as exc_info:
            policy.check_owner(blog, uuid4())

        assert exc_info.value.status_code == 403

    def test_owner_only_accepts_owner(self) -> None:
        owner_id = uuid4()
        policy = MutationPolicy(owner_only=True)

        policy.check_owner(BlogDB(title="Type wars", user_id=owner_id), owner_id)

"""Authorization policy for blog mutations."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from app.errors import ForbiddenError
from app.models import BlogDB


class BlogOperation(StrEnum):
    """Blog write operations the policy can gate."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class MutationPolicy:
    """
    Which blog writes need a token, and whether only the owner may change a blog.

    The default is the public contract: creating requires a token, updating
    and deleting do not, and ownership is not checked.

    Example:
        >>> strict = MutationPolicy(token_required=frozenset(BlogOperation), owner_only=True)
    """

    token_required: frozenset[BlogOperation] = frozenset({BlogOperation.CREATE})
    owner_only: bool = False

    def requires_token(self, operation: BlogOperation) -> bool:
        return operation in self.token_required

    def check_owner(self, blog: BlogDB, user_id: UUID | None) -> None:
        """
        Raise if ownership is enforced and the caller is not the blog's owner.

        Raises:
            ForbiddenError: If the caller does not own the blog
        """
        if self.owner_only and blog.user_id != user_id:
            raise ForbiddenError


DEFAULT_POLICY = MutationPolicy()

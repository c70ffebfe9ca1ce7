"""Authentication errors."""

from starlette.status import HTTP_401_UNAUTHORIZED

from app.configs import TOKEN_ERROR_MESSAGE
from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class MissingTokenError(UserAuthenticationError):
    """Raised when a protected operation is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__(TOKEN_ERROR_MESSAGE)


class InvalidTokenError(UserAuthenticationError):
    """Raised when a token fails signature, expiry or claim checks."""

    def __init__(self) -> None:
        super().__init__(TOKEN_ERROR_MESSAGE)


class InvalidSessionError(UserAuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self) -> None:
        super().__init__("invalid session")


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password")


class ForbiddenError(UserAuthenticationError):
    """Raised when the caller does not own the blog it tries to change."""

    def __init__(self, detail: str = "only the creator can modify this blog") -> None:
        super().__init__(detail, 403)


auth_exception_handler = create_exception_handler(logger)

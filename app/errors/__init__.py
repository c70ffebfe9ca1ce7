from app.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    InvalidSessionError,
    InvalidTokenError,
    MissingTokenError,
    UserAuthenticationError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler, error_response
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateUsernameError,
    RecordNotFoundError,
    TransactionError,
    database_exception_handler,
)
from app.errors.exceptions import (
    http_exception_handler,
    unhandled_exception_handler,
)
from app.errors.password_hasher import PasswordHashingError
from app.errors.validation import (
    MalformedIdError,
    ValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateUsernameError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidSessionError",
    "InvalidTokenError",
    "MalformedIdError",
    "MissingTokenError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "TransactionError",
    "UserAuthenticationError",
    "ValidationError",
    "app_validation_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "error_response",
    "http_exception_handler",
    "unhandled_exception_handler",
    "validation_exception_handler",
]

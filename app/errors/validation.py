"""Custom validation error handling for FastAPI."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.errors.base import BaseAppError, create_exception_handler, error_response
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


class ValidationError(BaseAppError):
    """Raised when a required field is missing or a value is malformed."""

    def __init__(self, detail: str = "Validation Error") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


class MalformedIdError(ValidationError):
    """Raised when a path identifier does not have the identifier shape."""

    def __init__(self) -> None:
        super().__init__("malformatted id")


def format_validation_errors(exc: RequestValidationError) -> str:
    """
    Flatten Pydantic errors into one readable message.

    ``{"loc": ("body", "title"), "msg": "Field required"}`` becomes
    ``"title: Field required"``.
    """
    messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", [])[1:])  # Skip 'body'
        message = error.get("msg", "Invalid value")
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages) or "Validation failed"


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request body validation errors as 400 responses.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with a single error message.
    """
    detail = format_validation_errors(cast(RequestValidationError, exc))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {detail}",
    )

    return error_response(detail, HTTP_400_BAD_REQUEST)


app_validation_exception_handler = create_exception_handler(logger)

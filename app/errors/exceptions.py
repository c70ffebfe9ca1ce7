"""Handlers for framework-level and unexpected exceptions."""

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from app.configs import DEFAULT_ERROR_MESSAGE, UNKNOWN_ENDPOINT_MESSAGE
from app.errors.base import error_response
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Render routing errors (unknown path, wrong method) as ``{"error": ...}``."""
    status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code == HTTP_404_NOT_FOUND:
        detail = UNKNOWN_ENDPOINT_MESSAGE
    else:
        detail = str(getattr(exc, "detail", DEFAULT_ERROR_MESSAGE))
    logger.info(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")
    headers = getattr(exc, "headers", None) if isinstance(exc, StarletteHTTPException) else None
    response = error_response(detail, status_code)
    if headers:
        response.headers.update(headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Log unexpected exceptions and answer with a generic 500."""
    logger.error(
        f"Unhandled error for ip: {host(request)} at endpoint {request.url.path}",
        exc_info=exc,
    )
    return error_response(DEFAULT_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR)

from app.middleware.middleware import (
    REQUEST_ID_HEADER,
    LoggingMiddleware,
    configure_cors,
    lifespan,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "LoggingMiddleware",
    "configure_cors",
    "lifespan",
]

# app/middleware/middleware.py
"""
Middleware components for the Bloglist backend.

This module contains the request logging middleware and CORS setup. It also
contains the lifespan event handler that creates the schema on startup and
disposes of the engine on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.configs import Settings
from app.db import close_db, init_db
from app.monitoring import bind_request_id, clear_context, get_logger
from app.utils.helpers import host, time_taken

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    settings: Settings = app.state.settings
    engine = app.state.engine

    # Startup
    logger.info(f"Starting {app.title} ({settings.ENVIRONMENT})...")
    try:
        await init_db(engine)
        logger.info("Services initialized successfully")
        logger.info("  - API Documentation: /docs")
        logger.info("  - Health Check: /health")
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")
    await close_db(engine)


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    allow_all = "*" in settings.CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log method, path, status and timing for every request."""

        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)
        start_time = perf_counter()

        logger.info(f"Request: {request.method} {request.url.path}, from ip: {host(request)}")
        try:
            response = await call_next(request)
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} "
                f"in {time_taken(start_time)}",
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_context()

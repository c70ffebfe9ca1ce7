# app/main.py

"""Bloglist Backend - blogs, users and token login over FastAPI and SQLModel."""

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth.permissions import DEFAULT_POLICY, MutationPolicy
from app.configs import Settings, get_settings
from app.db import build_engine, build_session_maker, check_db_connection
from app.errors import (
    BaseAppError,
    DatabaseError,
    UserAuthenticationError,
    ValidationError,
    app_validation_exception_handler,
    auth_exception_handler,
    create_exception_handler,
    database_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.managers.password_manager import PasswordHasher
from app.middleware import LoggingMiddleware, configure_cors, lifespan
from app.monitoring import configure_logging, get_logger
from app.routes import blog_router, login_router, user_router
from app.schemas import HealthCheckResponse
from app.utils.helpers import today_str

VERSION = "1.0.0"

logger = get_logger(__name__)

health_router = APIRouter(tags=["🩺 Health"])


@health_router.get(
    "/health",
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Version, overall status and database reachability.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "database": "connected"}
    """
    db_ok = await check_db_connection(request.app.state.engine)
    return HealthCheckResponse(
        version=request.app.version,
        status="ok" if db_ok else "degraded",
        timestamp=today_str(),
        database="connected" if db_ok else "unreachable",
    )


def create_app(
    settings: Settings | None = None,
    policy: MutationPolicy = DEFAULT_POLICY,
) -> FastAPI:
    """
    Build the application.

    Parameters
    ----------
    settings : Settings | None
        Configuration; read from the environment when omitted.
    policy : MutationPolicy
        Which blog writes need a token and whether ownership is enforced.

    Returns
    -------
    FastAPI
        Application with routes, middleware and error handlers registered.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Bloglist Backend API",
        version=VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        swagger_ui_parameters={
            "docExpansion": "none",
            "operationsSorter": "method",
        },
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)
    app.state.password_hasher = PasswordHasher(settings)
    app.state.mutation_policy = policy

    configure_cors(app, settings)
    app.add_middleware(LoggingMiddleware)

    routes = [
        health_router,
        blog_router,
        user_router,
        login_router,
    ]

    _ = [app.include_router(router) for router in routes]

    errors = [
        (UserAuthenticationError, auth_exception_handler),
        (DatabaseError, database_exception_handler),
        (ValidationError, app_validation_exception_handler),
        (BaseAppError, create_exception_handler(logger)),
        (RequestValidationError, validation_exception_handler),
        (StarletteHTTPException, http_exception_handler),
        (Exception, unhandled_exception_handler),
    ]

    _ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

    return app


app = create_app()


if __name__ == "__main__":
    from uvicorn import run

    run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=True,
    )

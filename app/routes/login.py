# app/routes/login.py

"""Login route issuing bearer tokens for username/password credentials."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from app.dependencies import AuthServiceDep
from app.schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"error": "invalid username or password"}},
            },
        },
    },
    operation_id="auth_login",
)
async def login(credentials: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    """
    Exchange credentials for an access token.

    Parameters
    ----------
    credentials : LoginRequest
        Username and password.
    service : AuthService
        Auth service dependency.

    Returns
    -------
    LoginResponse
        Signed token plus the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If the username is unknown or the password does not match.
    """
    user = await service.authenticate_user(
        credentials.username,
        credentials.password.get_secret_value(),
    )
    return service.create_token_for_user(user)

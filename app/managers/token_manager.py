"""Token manager for issuing and verifying JWT access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from app.configs import Settings
from app.errors import InvalidTokenError, MissingTokenError
from app.schemas.auth import TokenData

BEARER_PREFIX = "bearer "


def create_access_token(
    user_id: UUID,
    username: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed access token bound to a user.

    Args:
        user_id: User's UUID
        username: User's username
        settings: Application settings holding the signing secret
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    to_encode = {
        "username": username,
        "id": str(user_id),
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Strip the bearer scheme from an ``Authorization`` header value.

    The scheme is matched case-insensitively. A missing header, another scheme
    or an empty token all count as "no token".
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :].strip() or None


def decode_access_token(token: str, settings: Settings) -> TokenData:
    """
    Verify a token's signature and expiry and return its claims.

    Args:
        token: JWT token string
        settings: Application settings holding the signing secret

    Returns:
        TokenData: Decoded claims

    Raises:
        InvalidTokenError: If the signature, expiry or claims are invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
        )
    except JWTError as e:
        raise InvalidTokenError from e

    user_id: str | None = payload.get("id")
    if not user_id:
        raise InvalidTokenError

    try:
        return TokenData(user_id=UUID(str(user_id)), username=payload.get("username"))
    except ValueError as e:
        raise InvalidTokenError from e


def verify_authorization(authorization: str | None, settings: Settings) -> UUID:
    """
    Resolve an ``Authorization`` header to the claimed user id.

    Raises:
        MissingTokenError: If no bearer token is present
        InvalidTokenError: If the token does not verify
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise MissingTokenError
    return decode_access_token(token, settings).user_id

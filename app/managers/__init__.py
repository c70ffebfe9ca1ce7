from app.managers.password_manager import PasswordHasher
from app.managers.token_manager import (
    create_access_token,
    decode_access_token,
    extract_bearer_token,
    verify_authorization,
)

__all__ = [
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "extract_bearer_token",
    "verify_authorization",
]

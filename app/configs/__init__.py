from app.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    TOKEN_ERROR_MESSAGE,
    UNKNOWN_ENDPOINT_MESSAGE,
    Settings,
    get_settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "TOKEN_ERROR_MESSAGE",
    "UNKNOWN_ENDPOINT_MESSAGE",
    "Settings",
    "get_settings",
]

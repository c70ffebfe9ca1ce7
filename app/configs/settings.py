"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Bloglist backend. Settings are read once at startup and the
resulting object is frozen; request handling receives it explicitly instead
of reaching for module globals.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50
MIN_PASSWORD_LENGTH = 3
MAX_TITLE_LENGTH = 200
MAX_URL_LENGTH = 500

# Response constants
DEFAULT_ERROR_MESSAGE = "internal server error"
TOKEN_ERROR_MESSAGE = "token missing or invalid"
UNKNOWN_ENDPOINT_MESSAGE = "unknown endpoint"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    APP_NAME: str = "Bloglist Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"
    CORS_ORIGINS: list[str] = ["*"]

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Token Configuration
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Password hashing (Argon2id)
    ARGON2_MEMORY_COST: int = 65536  # KiB
    ARGON2_TIME_COST: int = 3
    ARGON2_PARALLELISM: int = 4


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built on first use."""
    return Settings()

"""
Password hashing module using Argon2 with passlib's CryptContext.

Argon2id is the primary scheme; pbkdf2_sha256 hashes are still accepted and
flagged as deprecated. Cost parameters come from the application settings so
tests can run with cheap parameters.
"""

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from app.configs import Settings
from app.errors import PasswordHashingError
from app.monitoring import get_logger

logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    Hashing is CPU bound, so the ``*_async`` variants run in the threadpool to
    keep the event loop free.
    """

    def __init__(self, settings: Settings) -> None:
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=settings.ARGON2_MEMORY_COST,
            argon2__time_cost=settings.ARGON2_TIME_COST,
            argon2__parallelism=settings.ARGON2_PARALLELISM,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If the backend fails

        Example:
            >>> hashed = hasher.hash("sekret")
            >>> hashed.startswith("$argon2id$")
            True
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            raise PasswordHashingError from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a stored hash.

        A missing hash still costs one dummy verification so that unknown
        usernames and wrong passwords take comparable time.
        """
        if not hashed_password:
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.warning("Stored hash is corrupted or has an unknown format")
            return False

    async def hash_async(self, password: str) -> str:
        return await run_in_threadpool(self.hash, password)

    async def verify_async(self, password: str, hashed_password: str | None) -> bool:
        return await run_in_threadpool(self.verify, password, hashed_password)

"""Authentication service handling registration and login."""

from sqlalchemy.exc import SQLAlchemyError

from app.configs import Settings
from app.errors import InvalidCredentialsError, TransactionError
from app.managers.password_manager import PasswordHasher
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.monitoring import get_logger
from app.repositories import UserRepository
from app.schemas.auth import LoginResponse
from app.schemas.user import UserCreate

logger = get_logger(__name__)


class AuthService:
    """Service for registering users and issuing tokens."""

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        settings: Settings,
    ) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
            hasher: Password hasher configured from settings
            settings: Application settings (token secret and lifetime)
        """
        self.user_repo = user_repo
        self.hasher = hasher
        self.settings = settings

    async def register_user(self, user: UserCreate) -> UserDB:
        """
        Register a new user.

        Args:
            user: Validated registration command

        Returns:
            UserDB: The stored user

        Raises:
            DuplicateUsernameError: If the username is taken
        """
        password_hash = await self.hasher.hash_async(user.password.get_secret_value())
        db_user = await self.user_repo.create(user.username, user.name, password_hash)
        try:
            await self.user_repo.session.commit()
        except SQLAlchemyError as e:
            await self.user_repo.session.rollback()
            raise TransactionError(detail=f"Failed to commit user: {e}") from e

        logger.info(f"User {db_user.username} registered")
        return db_user

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Authenticate a user by username and password.

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)
        password_hash = user.password_hash if user else None
        if not await self.hasher.verify_async(password, password_hash) or user is None:
            logger.warning(f"Failed login for {username}")
            raise InvalidCredentialsError
        return user

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """
        Issue an access token bound to the user's identity.

        Returns:
            LoginResponse: Token with the user's username and name
        """
        token = create_access_token(
            user_id=user.id,
            username=user.username,
            settings=self.settings,
        )
        return LoginResponse(token=token, username=user.username, name=user.name)

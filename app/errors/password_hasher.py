from app.errors.base import BaseAppError


class PasswordHashingError(BaseAppError):
    """Raised when the hashing backend fails; surfaces as a 500."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail)

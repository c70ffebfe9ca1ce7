from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class TokenData(BaseModel):
    """Claims carried by an access token."""

    user_id: UUID
    username: str | None = None


class LoginRequest(BaseModel):
    """Credentials posted to ``/api/login``."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, examples=["mluukkai"])
    password: SecretStr = Field(..., min_length=1, examples=["salainen"])


class LoginResponse(BaseModel):
    """Token issued on successful login."""

    token: str
    username: str
    name: str | None = None

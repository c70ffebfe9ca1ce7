from app.schemas.auth import LoginRequest, LoginResponse, TokenData
from app.schemas.blog import (
    AuthorCountResponse,
    AuthorLikesResponse,
    BlogCreate,
    BlogListResponse,
    BlogOwner,
    BlogResponse,
    BlogStatsResponse,
    BlogSummary,
    BlogUpdate,
)
from app.schemas.health import HealthCheckResponse
from app.schemas.user import UserCreate, UserListResponse, UserResponse

__all__ = [
    "AuthorCountResponse",
    "AuthorLikesResponse",
    "BlogCreate",
    "BlogListResponse",
    "BlogOwner",
    "BlogResponse",
    "BlogStatsResponse",
    "BlogSummary",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenData",
    "UserCreate",
    "UserListResponse",
    "UserResponse",
]

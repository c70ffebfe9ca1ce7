# app/dependencies/dependencies.py

"""Application dependencies: settings, repositories and services per request."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.permissions import MutationPolicy
from app.configs import Settings
from app.db import get_session
from app.managers.password_manager import PasswordHasher
from app.repositories import BlogRepository, UserRepository
from app.services import AuthService, BlogService


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_mutation_policy(request: Request) -> MutationPolicy:
    return request.app.state.mutation_policy


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    FastAPI caches `get_session` per request, so both repositories share one
    session and therefore one transaction.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """Resolve the `BlogRepository` dependency."""
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_blog_service(
    blog_repo: BlogRepoDep,
    user_repo: UserRepoDep,
    settings: SettingsDep,
    policy: Annotated[MutationPolicy, Depends(get_mutation_policy)],
) -> BlogService:
    return BlogService(blog_repo, user_repo, settings, policy)


def get_auth_service(
    user_repo: UserRepoDep,
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    settings: SettingsDep,
) -> AuthService:
    return AuthService(user_repo, hasher, settings)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]

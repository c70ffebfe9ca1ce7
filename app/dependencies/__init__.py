# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    SessionDep,
    SettingsDep,
    UserRepoDep,
    get_app_settings,
    get_auth_service,
    get_blog_repository,
    get_blog_service,
    get_user_repository,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "SessionDep",
    "SettingsDep",
    "UserRepoDep",
    "get_app_settings",
    "get_auth_service",
    "get_blog_repository",
    "get_blog_service",
    "get_user_repository",
]

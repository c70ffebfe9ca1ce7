# app/routes/user.py

"""
User Routes.

Summary
-------
Endpoints include:
  - Create user
  - Get all users (blogs populated)

Dependencies
------------
  - `AuthServiceDep`: Registers users with hashed passwords.
  - `UserRepoDep`: Reads users and their blog collections.

Passwords are hashed before they reach the store and never appear in a
response.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse

from app.dependencies import AuthServiceDep, UserRepoDep
from app.models import BlogDB, UserDB
from app.schemas import BlogSummary, UserCreate, UserListResponse, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


def db_user_to_response(db_user: UserDB, blog_ids: list[UUID]) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.
    blog_ids : list[UUID]
        Ids of the user's blogs in creation order.

    Returns
    -------
    UserResponse
        Validated response model without the password hash.
    """
    return UserResponse(
        id=db_user.id,
        username=db_user.username,
        name=db_user.name,
        blogs=blog_ids,
    )


def db_user_to_list_response(db_user: UserDB, blogs: list[BlogDB]) -> UserListResponse:
    return UserListResponse(
        id=db_user.id,
        username=db_user.username,
        name=db_user.name,
        blogs=[BlogSummary.model_validate(blog) for blog in blogs],
    )


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    summary="Create a new user",
    description="Register a user. Usernames are unique; the password is stored hashed.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {"error": "expected `username` to be unique. Value: `mluukkai`"},
                },
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {
                    "username": "mluukkai",
                    "name": "Matti Luukkainen",
                    "password": "salainen",
                },
            ],
        ),
    ],
    service: AuthServiceDep,
    repo: UserRepoDep,
) -> UserResponse:
    """
    Create a new user.

    Parameters
    ----------
    user : UserCreate
        User input payload.
    service : AuthService
        Auth service dependency.
    repo : UserRepository
        User repository dependency, used to read back the blog collection.

    Returns
    -------
    UserResponse
        Created user; `blogs` is empty.

    Raises
    ------
    DuplicateUsernameError
        If the username is already registered.
    """
    db_user = await service.register_user(user)
    return db_user_to_response(db_user, await repo.get_blog_ids(db_user.id))


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserListResponse],
    summary="Get all users",
    description="Retrieve every user with their blogs populated in creation order.",
    operation_id="users_get_all",
)
async def get_users(repo: UserRepoDep) -> list[UserListResponse]:
    """
    List users.

    Parameters
    ----------
    repo : UserRepository
        User repository dependency.

    Returns
    -------
    list[UserListResponse]
        Users with their blogs.
    """
    return [db_user_to_list_response(user, blogs) for user, blogs in await repo.get_all_with_blogs()]

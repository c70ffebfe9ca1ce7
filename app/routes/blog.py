# app/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (owners populated)
  - Blog statistics
  - Get blog by id
  - Create blog (bearer token required)
  - Update blog
  - Delete blog

Dependencies
------------
  - `BlogServiceDep`: Blog service bound to the request's session, the
    application settings and the configured mutation policy.

Identifiers
-----------
Path ids are checked for shape before any lookup: a malformed id is a `400`,
a well-formed id with no blog behind it is a `404`.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Header
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_204_NO_CONTENT

from app.dependencies import BlogServiceDep
from app.models import BlogDB, UserDB
from app.schemas import (
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
from app.utils.ids import parse_id

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

AuthorizationHeader = Annotated[
    str | None,
    Header(description="`Bearer <token>` issued by `/api/login`"),
]

ERROR_400 = {
    "description": "Bad request",
    "content": {"application/json": {"example": {"error": "malformatted id"}}},
}
ERROR_401 = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"error": "token missing or invalid"}}},
}
ERROR_404 = {
    "description": "Not found",
    "content": {"application/json": {"example": {"error": "Blog <id> not found"}}},
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(db_blog)


def db_blog_to_list_response(db_blog: BlogDB, owner: UserDB | None) -> BlogListResponse:
    """
    Convert a `BlogDB` and its owner to `BlogListResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    owner : UserDB | None
        Owning user, if the blog has one.

    Returns
    -------
    BlogListResponse
        Blog with the owner's id, username and name embedded.
    """
    return BlogListResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=BlogOwner.model_validate(owner) if owner else None,
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogListResponse],
    summary="Get all blogs",
    description="Retrieve every blog with its owner's username and name.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "title": "React patterns",
                            "author": "Michael Chan",
                            "url": "https://reactpatterns.com/",
                            "likes": 7,
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "username": "mluukkai",
                                "name": "Matti Luukkainen",
                            },
                        },
                    ],
                },
            },
        },
    },
    operation_id="blogs_get_all",
)
async def get_blogs(service: BlogServiceDep) -> list[BlogListResponse]:
    """
    List blogs.

    Parameters
    ----------
    service : BlogService
        Blog service dependency.

    Returns
    -------
    list[BlogListResponse]
        Blogs in store order.
    """
    return [db_blog_to_list_response(blog, owner) for blog, owner in await service.list_blogs()]


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatsResponse,
    summary="Blog statistics",
    description="Total likes, the most liked blog and the most prolific and most liked authors.",
    operation_id="blogs_stats",
)
async def get_blog_stats(service: BlogServiceDep) -> BlogStatsResponse:
    """
    Aggregate statistics over all blogs.

    Returns
    -------
    BlogStatsResponse
        Aggregates; the optional parts are null when there are no blogs.
    """
    total, favorite, top_author, top_liked = await service.stats()
    return BlogStatsResponse(
        total_likes=total,
        favorite_blog=BlogSummary.model_validate(favorite) if favorite else None,
        most_blogs=AuthorCountResponse(**top_author._asdict()) if top_author else None,
        most_likes=AuthorLikesResponse(**top_liked._asdict()) if top_liked else None,
    )


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a blog by its id.",
    responses={400: ERROR_400, 404: ERROR_404},
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: str, service: BlogServiceDep) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier as sent in the path.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Blog data.

    Raises
    ------
    MalformedIdError
        If the id does not have the identifier shape.
    RecordNotFoundError
        If no blog has this id.
    """
    return db_blog_to_response(await service.get_blog(parse_id(blog_id)))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Create a new blog",
    description="Create a blog owned by the user the bearer token was issued to.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "550e8400-e29b-41d4-a716-446655440000",
                        "title": "React patterns",
                        "author": "Michael Chan",
                        "url": "https://reactpatterns.com/",
                        "likes": 0,
                        "user": "123e4567-e89b-12d3-a456-426614174000",
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "title: Field required"}}},
        },
        401: ERROR_401,
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                },
            ],
        ),
    ],
    service: BlogServiceDep,
    authorization: AuthorizationHeader = None,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload; `likes` defaults to 0.
    service : BlogService
        Blog service dependency.
    authorization : str | None
        Raw `Authorization` header.

    Returns
    -------
    BlogResponse
        Created blog, with `user` set to the owner's id.
    """
    return db_blog_to_response(await service.create_blog(blog, authorization))


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Replace a blog's title, author, url and likes. Fields left out are cleared.",
    responses={400: ERROR_400, 404: ERROR_404},
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    blog_update: BlogUpdate,
    service: BlogServiceDep,
    authorization: AuthorizationHeader = None,
) -> BlogResponse:
    """
    Update blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier as sent in the path.
    blog_update : BlogUpdate
        Replacement values.
    service : BlogService
        Blog service dependency.
    authorization : str | None
        Raw `Authorization` header; only consulted when the policy asks for it.

    Returns
    -------
    BlogResponse
        Updated blog.
    """
    db_blog = await service.update_blog(parse_id(blog_id), blog_update, authorization)
    return db_blog_to_response(db_blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Succeeds whether or not the blog still exists.",
    responses={400: ERROR_400},
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: str,
    service: BlogServiceDep,
    authorization: AuthorizationHeader = None,
) -> Response:
    """
    Delete blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier as sent in the path.
    service : BlogService
        Blog service dependency.
    authorization : str | None
        Raw `Authorization` header; only consulted when the policy asks for it.

    Returns
    -------
    Response
        Empty `204` response.
    """
    await service.delete_blog(parse_id(blog_id), authorization)
    return Response(status_code=HTTP_204_NO_CONTENT)

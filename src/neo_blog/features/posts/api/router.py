"""Post API endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from ....api.dependencies import Commands, CurrentUser, OwnedPost, Queries, get_container
from ....api.models import DeleteResponse
from ....container import BlogContainer
from ..application.commands import (
    CreatePostCommand,
    DeletePostCommand,
    PublishPostCommand,
    UnpublishPostCommand,
    UpdatePostCommand,
)
from ..application.queries import GetPostByIdQuery, GetPostsQuery
from ..core.exceptions import PostNotFoundError
from .request import PostCreateRequest, PostUpdateRequest
from .response import PostListResponse, PostResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get("", response_model=PostListResponse, summary="List posts")
async def list_posts(
    query_bus: Queries,
    container: Annotated[BlogContainer, Depends(get_container)],
    published: Optional[bool] = Query(None, description="Filter by publication state"),
    author_id: Optional[int] = Query(None, ge=0, description="Filter by author"),
    category_id: Optional[int] = Query(None, ge=0, description="Filter by category"),
    skip: int = Query(0, ge=0, description="Posts to skip"),
    take: Optional[int] = Query(None, ge=1, description="Page size"),
) -> PostListResponse:
    settings = container.settings
    page_size = min(take or settings.default_page_size, settings.max_page_size)
    result = await query_bus.execute(
        GetPostsQuery(
            published=published,
            author_id=author_id,
            category_id=category_id,
            skip=skip,
            take=page_size,
        )
    )
    return PostListResponse.model_validate(result)


@router.get("/{post_id}", response_model=PostResponse, summary="Get post")
async def get_post(post_id: int, query_bus: Queries) -> PostResponse:
    post = await query_bus.execute(GetPostByIdQuery(post_id))
    if post is None:
        raise PostNotFoundError(f"ID: {post_id}")
    return PostResponse.model_validate(post)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    description="Creates a draft authored by the caller",
)
async def create_post(
    request: PostCreateRequest, current_user: CurrentUser, command_bus: Commands
) -> PostResponse:
    post = await command_bus.execute(
        CreatePostCommand(
            title=request.title,
            content=request.content,
            author_id=current_user.id,
            category_ids=request.category_ids,
        )
    )
    return PostResponse.model_validate(post)


@router.patch("/{post_id}", response_model=PostResponse, summary="Update post")
async def update_post(
    post_id: int, request: PostUpdateRequest, post: OwnedPost, command_bus: Commands
) -> PostResponse:
    updated = await command_bus.execute(
        UpdatePostCommand(
            post_id=post_id,
            title=request.title,
            content=request.content,
            category_ids=request.category_ids,
            published=request.published,
        )
    )
    return PostResponse.model_validate(updated)


@router.post("/{post_id}/publish", response_model=PostResponse, summary="Publish post")
async def publish_post(post_id: int, post: OwnedPost, command_bus: Commands) -> PostResponse:
    published = await command_bus.execute(PublishPostCommand(post_id=post_id))
    return PostResponse.model_validate(published)


@router.post("/{post_id}/unpublish", response_model=PostResponse, summary="Unpublish post")
async def unpublish_post(post_id: int, post: OwnedPost, command_bus: Commands) -> PostResponse:
    unpublished = await command_bus.execute(UnpublishPostCommand(post_id=post_id))
    return PostResponse.model_validate(unpublished)


@router.delete("/{post_id}", response_model=DeleteResponse, summary="Delete post")
async def delete_post(post_id: int, post: OwnedPost, command_bus: Commands) -> DeleteResponse:
    result = await command_bus.execute(DeletePostCommand(post_id=post_id))
    return DeleteResponse.model_validate(result)

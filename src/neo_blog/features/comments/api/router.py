"""Comment and reply API endpoints.

Routes span three prefixes (``/posts/{id}/comments``, ``/comments`` and
``/replies``) so the router itself carries no prefix.
"""

import logging
from typing import List

from fastapi import APIRouter, status

from ....api.dependencies import Commands, CurrentUser, Queries
from ....api.models import DeleteResponse
from ..application.commands import (
    CreateCommentCommand,
    CreateCommentResponseCommand,
    DeleteCommentCommand,
    DeleteCommentResponseCommand,
    UpdateCommentCommand,
    UpdateCommentResponseCommand,
)
from ..application.queries import (
    GetCommentByIdQuery,
    GetCommentResponseByIdQuery,
    GetCommentsByPostQuery,
)
from ..core.exceptions import CommentNotFoundError, CommentResponseNotFoundError
from .request import CommentContentRequest
from .response import CommentReplyResponse, CommentResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Comments"])


@router.get("/posts/{post_id}/comments", response_model=List[CommentResponse], summary="List comments")
async def list_comments(post_id: int, query_bus: Queries) -> List[CommentResponse]:
    comments = await query_bus.execute(GetCommentsByPostQuery(post_id))
    return [CommentResponse.model_validate(comment) for comment in comments]


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
)
async def create_comment(
    post_id: int, request: CommentContentRequest, current_user: CurrentUser, command_bus: Commands
) -> CommentResponse:
    comment = await command_bus.execute(
        CreateCommentCommand(content=request.content, post_id=post_id, author_id=current_user.id)
    )
    return CommentResponse.model_validate(comment)


@router.get("/comments/{comment_id}", response_model=CommentResponse, summary="Get comment")
async def get_comment(comment_id: int, query_bus: Queries) -> CommentResponse:
    comment = await query_bus.execute(GetCommentByIdQuery(comment_id))
    if comment is None:
        raise CommentNotFoundError(f"ID: {comment_id}")
    return CommentResponse.model_validate(comment)


@router.patch("/comments/{comment_id}", response_model=CommentResponse, summary="Edit comment")
async def update_comment(
    comment_id: int, request: CommentContentRequest, current_user: CurrentUser, command_bus: Commands
) -> CommentResponse:
    comment = await command_bus.execute(
        UpdateCommentCommand(
            comment_id=comment_id, content=request.content, requester_id=current_user.id
        )
    )
    return CommentResponse.model_validate(comment)


@router.delete("/comments/{comment_id}", response_model=DeleteResponse, summary="Delete comment")
async def delete_comment(comment_id: int, current_user: CurrentUser, command_bus: Commands) -> DeleteResponse:
    result = await command_bus.execute(
        DeleteCommentCommand(comment_id=comment_id, requester_id=current_user.id)
    )
    return DeleteResponse.model_validate(result)


@router.post(
    "/comments/{comment_id}/replies",
    response_model=CommentReplyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Reply to a comment",
)
async def create_reply(
    comment_id: int, request: CommentContentRequest, current_user: CurrentUser, command_bus: Commands
) -> CommentReplyResponse:
    reply = await command_bus.execute(
        CreateCommentResponseCommand(
            comment_id=comment_id, content=request.content, author_id=current_user.id
        )
    )
    return CommentReplyResponse.model_validate(reply)


@router.get("/replies/{reply_id}", response_model=CommentReplyResponse, summary="Get reply")
async def get_reply(reply_id: int, query_bus: Queries) -> CommentReplyResponse:
    reply = await query_bus.execute(GetCommentResponseByIdQuery(reply_id))
    if reply is None:
        raise CommentResponseNotFoundError(f"ID: {reply_id}")
    return CommentReplyResponse.model_validate(reply)


@router.patch("/replies/{reply_id}", response_model=CommentReplyResponse, summary="Edit reply")
async def update_reply(
    reply_id: int, request: CommentContentRequest, current_user: CurrentUser, command_bus: Commands
) -> CommentReplyResponse:
    reply = await command_bus.execute(
        UpdateCommentResponseCommand(
            response_id=reply_id, content=request.content, requester_id=current_user.id
        )
    )
    return CommentReplyResponse.model_validate(reply)


@router.delete("/replies/{reply_id}", response_model=DeleteResponse, summary="Delete reply")
async def delete_reply(reply_id: int, current_user: CurrentUser, command_bus: Commands) -> DeleteResponse:
    result = await command_bus.execute(
        DeleteCommentResponseCommand(response_id=reply_id, requester_id=current_user.id)
    )
    return DeleteResponse.model_validate(result)

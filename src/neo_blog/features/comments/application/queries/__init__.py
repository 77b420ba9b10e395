"""Comment queries."""

from .get_comment_by_id import GetCommentByIdQuery, GetCommentByIdQueryHandler
from .get_comments_by_post import GetCommentsByPostQuery, GetCommentsByPostQueryHandler
from .get_comment_response_by_id import (
    GetCommentResponseByIdQuery,
    GetCommentResponseByIdQueryHandler,
)

__all__ = [
    "GetCommentByIdQuery",
    "GetCommentByIdQueryHandler",
    "GetCommentsByPostQuery",
    "GetCommentsByPostQueryHandler",
    "GetCommentResponseByIdQuery",
    "GetCommentResponseByIdQueryHandler",
]

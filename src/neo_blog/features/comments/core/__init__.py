"""Comment domain model."""

from .value_objects import CommentContent
from .entities import Comment, CommentResponse
from .events import (
    CommentCreatedEvent,
    CommentUpdatedEvent,
    CommentDeletedEvent,
    CommentResponseCreatedEvent,
    CommentResponseUpdatedEvent,
    CommentResponseDeletedEvent,
    CommentResponseAddedToCommentEvent,
    ResponseRemovedFromCommentEvent,
)
from .exceptions import (
    CommentNotFoundError,
    CommentResponseNotFoundError,
    ParentCommentNotFoundError,
    PostNotFoundForCommentError,
)
from .protocols import CommentRepository, CommentResponseRepository

__all__ = [
    "CommentContent",
    "Comment",
    "CommentResponse",
    "CommentCreatedEvent",
    "CommentUpdatedEvent",
    "CommentDeletedEvent",
    "CommentResponseCreatedEvent",
    "CommentResponseUpdatedEvent",
    "CommentResponseDeletedEvent",
    "CommentResponseAddedToCommentEvent",
    "ResponseRemovedFromCommentEvent",
    "CommentNotFoundError",
    "CommentResponseNotFoundError",
    "ParentCommentNotFoundError",
    "PostNotFoundForCommentError",
    "CommentRepository",
    "CommentResponseRepository",
]

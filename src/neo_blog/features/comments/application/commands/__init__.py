"""Comment commands."""

from .create_comment import CreateCommentCommand, CreateCommentCommandHandler
from .update_comment import UpdateCommentCommand, UpdateCommentCommandHandler
from .delete_comment import DeleteCommentCommand, DeleteCommentCommandHandler
from .create_comment_response import (
    CreateCommentResponseCommand,
    CreateCommentResponseCommandHandler,
)
from .update_comment_response import (
    UpdateCommentResponseCommand,
    UpdateCommentResponseCommandHandler,
)
from .delete_comment_response import (
    DeleteCommentResponseCommand,
    DeleteCommentResponseCommandHandler,
)

__all__ = [
    "CreateCommentCommand",
    "CreateCommentCommandHandler",
    "UpdateCommentCommand",
    "UpdateCommentCommandHandler",
    "DeleteCommentCommand",
    "DeleteCommentCommandHandler",
    "CreateCommentResponseCommand",
    "CreateCommentResponseCommandHandler",
    "UpdateCommentResponseCommand",
    "UpdateCommentResponseCommandHandler",
    "DeleteCommentResponseCommand",
    "DeleteCommentResponseCommandHandler",
]

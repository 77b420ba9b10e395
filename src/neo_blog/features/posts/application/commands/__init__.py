"""Post commands."""

from .create_post import CreatePostCommand, CreatePostCommandHandler
from .update_post import UpdatePostCommand, UpdatePostCommandHandler
from .publish_post import PublishPostCommand, PublishPostCommandHandler
from .unpublish_post import UnpublishPostCommand, UnpublishPostCommandHandler
from .delete_post import DeletePostCommand, DeletePostCommandHandler

__all__ = [
    "CreatePostCommand",
    "CreatePostCommandHandler",
    "UpdatePostCommand",
    "UpdatePostCommandHandler",
    "PublishPostCommand",
    "PublishPostCommandHandler",
    "UnpublishPostCommand",
    "UnpublishPostCommandHandler",
    "DeletePostCommand",
    "DeletePostCommandHandler",
]

"""Post domain model."""

from .value_objects import PostTitle, PostContent
from .entities import Post
from .events import (
    PostCreatedEvent,
    PostUpdatedEvent,
    PostPublishedEvent,
    PostUnpublishedEvent,
    PostDeletedEvent,
)
from .exceptions import (
    PostNotFoundError,
    PostContentMissingError,
    PostIsAlreadyPublishedError,
    PostIsNotPublishedError,
)
from .protocols import FindPostQuery, PostRepository

__all__ = [
    "PostTitle",
    "PostContent",
    "Post",
    "PostCreatedEvent",
    "PostUpdatedEvent",
    "PostPublishedEvent",
    "PostUnpublishedEvent",
    "PostDeletedEvent",
    "PostNotFoundError",
    "PostContentMissingError",
    "PostIsAlreadyPublishedError",
    "PostIsNotPublishedError",
    "FindPostQuery",
    "PostRepository",
]

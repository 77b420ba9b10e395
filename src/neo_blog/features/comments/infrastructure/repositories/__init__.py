"""Comment and reply repositories."""

from .asyncpg_comment_repository import (
    AsyncPGCommentRepository,
    AsyncPGCommentResponseRepository,
)
from .memory_comment_repository import (
    InMemoryCommentRepository,
    InMemoryCommentResponseRepository,
)

__all__ = [
    "AsyncPGCommentRepository",
    "AsyncPGCommentResponseRepository",
    "InMemoryCommentRepository",
    "InMemoryCommentResponseRepository",
]

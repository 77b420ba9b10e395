"""Comment and reply domain events."""

from dataclasses import dataclass

from ....core.events import DomainEvent
from ....core.value_objects import Identifier


@dataclass(frozen=True, kw_only=True)
class CommentCreatedEvent(DomainEvent):
    post_id: Identifier
    author_id: Identifier


@dataclass(frozen=True, kw_only=True)
class CommentUpdatedEvent(DomainEvent):
    pass


@dataclass(frozen=True, kw_only=True)
class CommentDeletedEvent(DomainEvent):
    post_id: Identifier


@dataclass(frozen=True, kw_only=True)
class CommentResponseCreatedEvent(DomainEvent):
    comment_id: Identifier


@dataclass(frozen=True, kw_only=True)
class CommentResponseUpdatedEvent(CommentUpdatedEvent):
    """Reply edited; subscribers to CommentUpdatedEvent receive it too."""
    comment_id: Identifier


@dataclass(frozen=True, kw_only=True)
class CommentResponseDeletedEvent(DomainEvent):
    comment_id: Identifier


@dataclass(frozen=True, kw_only=True)
class CommentResponseAddedToCommentEvent(DomainEvent):
    response_id: Identifier


@dataclass(frozen=True, kw_only=True)
class ResponseRemovedFromCommentEvent(DomainEvent):
    response_id: Identifier

"""Post domain events."""

from dataclasses import dataclass
from typing import Tuple

from ....core.events import DomainEvent
from ....core.value_objects import Identifier


@dataclass(frozen=True, kw_only=True)
class PostCreatedEvent(DomainEvent):
    author_id: Identifier


@dataclass(frozen=True, kw_only=True)
class PostUpdatedEvent(DomainEvent):
    # any of "title", "content", "categories"
    changed_fields: Tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class PostPublishedEvent(DomainEvent):
    pass


@dataclass(frozen=True, kw_only=True)
class PostUnpublishedEvent(DomainEvent):
    pass


@dataclass(frozen=True, kw_only=True)
class PostDeletedEvent(DomainEvent):
    pass

"""Category domain events."""

from dataclasses import dataclass

from ....core.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class CategoryCreatedEvent(DomainEvent):
    name: str


@dataclass(frozen=True, kw_only=True)
class CategoryUpdatedEvent(DomainEvent):
    new_name: str
    old_name: str


@dataclass(frozen=True, kw_only=True)
class CategoryDeletedEvent(DomainEvent):
    pass

"""User domain events."""

from dataclasses import dataclass
from typing import Tuple

from ....core.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class UserCreatedEvent(DomainEvent):
    email: str
    username: str


@dataclass(frozen=True, kw_only=True)
class UserUpdatedEvent(DomainEvent):
    updated_fields: Tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class UserDeletedEvent(DomainEvent):
    pass

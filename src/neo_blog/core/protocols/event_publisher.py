"""Event publisher protocol consumed by command handlers."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..events import DomainEvent


class EventPublisher(ABC):
    """Protocol for publishing domain events to subscribers."""

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish a single event.

        Args:
            event: Event to deliver to every subscriber of its type

        Raises:
            Any subscriber failure, unchanged.
        """
        ...

    @abstractmethod
    async def publish_all(self, events: Sequence[DomainEvent]) -> None:
        """Publish events in order, stopping at the first failure."""
        ...

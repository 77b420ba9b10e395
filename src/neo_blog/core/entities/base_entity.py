"""Base class for aggregates that stage domain events.

Aggregates never publish on their own. Mutations append events to a
private buffer and the orchestrating command handler flushes the buffer
with ``publish_events`` once the repository write has succeeded.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from ..events import DomainEvent
from ..exceptions import InvalidStateError
from ..protocols import EventPublisher
from ..value_objects import Identifier

logger = logging.getLogger(__name__)


class BaseEntity:
    """Identity plus a pending domain event buffer."""

    def __init__(self, id: Optional[Identifier] = None):
        self._id = id if id is not None else Identifier.new()
        self._domain_events: List[DomainEvent] = []

    @property
    def id(self) -> Identifier:
        return self._id

    @property
    def is_new(self) -> bool:
        """True until the aggregate has been given a database id."""
        return self._id.is_new

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        return tuple(self._domain_events)

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
        logger.debug(
            f"{event.event_name} added for Aggregate {type(self).__name__} ID {self._id.value}"
        )

    def clear_events(self) -> None:
        self._domain_events.clear()

    async def publish_events(self, publisher: EventPublisher) -> None:
        """Publish pending events then clear the buffer.

        The buffer is only cleared when the publisher returns, so a failed
        publish leaves the events staged.
        """
        if not self._domain_events:
            return
        events = list(self._domain_events)
        await publisher.publish_all(events)
        self.clear_events()

    def assign_id(self, id: Identifier) -> None:
        """Give a new aggregate its database id.

        Called by repositories on first insert. Events staged while the
        aggregate was unpersisted are re-addressed to the new id.
        """
        if not self.is_new:
            raise InvalidStateError(
                f"{type(self).__name__} already has ID {self._id.value}"
            )
        old_id = self._id
        self._id = id
        self._domain_events = [
            replace(event, aggregate_id=id) if event.aggregate_id == old_id else event
            for event in self._domain_events
        ]

    def equals(self, other: object) -> bool:
        return self == other

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BaseEntity) or type(self) is not type(other):
            return False
        # Two unpersisted aggregates share the 0 sentinel but are distinct.
        if self.is_new or other.is_new:
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        if self.is_new:
            return id(self)
        return hash((type(self).__name__, self._id.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.value})"

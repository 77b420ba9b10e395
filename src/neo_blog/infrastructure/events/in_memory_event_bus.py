"""In-process event bus.

Subscribers are registered per event type and awaited sequentially in
subscription order. Subscribing to a base class (for example
``DomainEvent``) receives every subclass as well.
"""

import inspect
from collections import deque
import logging
from typing import Any, Awaitable, Callable, Deque, Dict, List, Sequence, Type, Union

from ...core.events import DomainEvent
from ...core.protocols import EventPublisher

logger = logging.getLogger(__name__)

EventCallback = Callable[[DomainEvent], Awaitable[Any]]
Subscriber = Union[EventCallback, Any]


class InMemoryEventBus(EventPublisher):
    """EventPublisher that dispatches to in-process subscribers."""

    def __init__(self, history_size: int = 1000):
        self._subscribers: Dict[Type[DomainEvent], List[Subscriber]] = {}
        self._published: Deque[DomainEvent] = deque(maxlen=history_size)

    def subscribe(self, event_type: Type[DomainEvent], subscriber: Subscriber) -> None:
        """Register an async callable or an object with ``async handle(event)``."""
        if not callable(subscriber) and not hasattr(subscriber, "handle"):
            raise TypeError("Subscriber must be callable or define handle(event)")
        self._subscribers.setdefault(event_type, []).append(subscriber)

    @property
    def published_events(self) -> List[DomainEvent]:
        """Most recently published events, oldest first."""
        return list(self._published)

    def _subscribers_for(self, event: DomainEvent) -> List[Subscriber]:
        matched: List[Subscriber] = []
        for klass in type(event).__mro__:
            matched.extend(self._subscribers.get(klass, []))
        return matched

    async def publish(self, event: DomainEvent) -> None:
        self._published.append(event)
        subscribers = self._subscribers_for(event)
        logger.debug(
            f"Publishing {event.event_name} for aggregate {event.aggregate_id.value} "
            f"to {len(subscribers)} subscriber(s)"
        )
        for subscriber in subscribers:
            handle = getattr(subscriber, "handle", subscriber)
            result = handle(event)
            if inspect.isawaitable(result):
                await result

    async def publish_all(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)

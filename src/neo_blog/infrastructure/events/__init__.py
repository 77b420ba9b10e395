"""In-process event bus."""

from .in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]

"""Domain event base types."""

from .domain_event import DomainEvent, utc_now

__all__ = ["DomainEvent", "utc_now"]

"""Base record for domain events staged by aggregates."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..value_objects import Identifier


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """A fact that happened to an aggregate.

    Events are immutable records. Subclasses add their payload as further
    keyword-only fields.
    """

    aggregate_id: Identifier
    occurred_on: datetime = field(default_factory=utc_now)

    @property
    def event_name(self) -> str:
        return type(self).__name__

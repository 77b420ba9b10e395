"""Steps shared by every command handler's write pipeline."""

from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from ..core.entities import BaseEntity
from ..core.exceptions import PostConditionError
from ..core.protocols import EventPublisher

E = TypeVar("E", bound=BaseEntity)
T = TypeVar("T")


@dataclass
class DeleteResultDto:
    """Outcome of a delete command."""
    success: bool


async def save_and_publish(repository: Any, entity: E, publisher: EventPublisher) -> E:
    """Persist ``entity`` and only then flush its staged events.

    Repositories assign ids in place, but a repository may also hand back a
    different instance; in that case the id is copied onto ``entity`` so
    its Created event names the stored row.
    """
    saved = await repository.save(entity)
    if saved is not None and saved is not entity and entity.is_new and not saved.is_new:
        entity.assign_id(saved.id)
    await entity.publish_events(publisher)
    return saved if saved is not None else entity


def require_read_model(dto: Optional[T], label: str, entity_id: int, created: bool = False) -> T:
    """Fail loudly when a write's read model cannot be fetched back.

    Raises:
        PostConditionError: if ``dto`` is None
    """
    if dto is None:
        state = "newly created" if created else "updated"
        raise PostConditionError(f"Failed to fetch {state} {label} with ID: {entity_id}.")
    return dto

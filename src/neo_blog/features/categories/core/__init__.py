"""Category domain model."""

from .value_objects import CategoryName
from .entities import Category
from .events import CategoryCreatedEvent, CategoryUpdatedEvent, CategoryDeletedEvent
from .exceptions import (
    CategoryNotFoundError,
    CategoryNameAlreadyExistsError,
    CategoryInUseError,
)
from .protocols import CategoryRepository

__all__ = [
    "CategoryName",
    "Category",
    "CategoryCreatedEvent",
    "CategoryUpdatedEvent",
    "CategoryDeletedEvent",
    "CategoryNotFoundError",
    "CategoryNameAlreadyExistsError",
    "CategoryInUseError",
    "CategoryRepository",
]

"""Category aggregate."""

from typing import Optional

from ....core.entities import BaseEntity
from ....core.exceptions import ArgumentNotProvidedError, ArgumentOutOfRangeError
from ....core.value_objects import Identifier
from .events import CategoryCreatedEvent, CategoryUpdatedEvent
from .value_objects import CategoryName

# Stricter than CategoryName's own 2..50 bounds.
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 20


class Category(BaseEntity):
    """A named category. Construct through ``Category.create``."""

    def __init__(self, name: CategoryName, id: Optional[Identifier] = None):
        super().__init__(id)
        self._name = name

    @classmethod
    def create(cls, name: CategoryName, id: Optional[Identifier] = None) -> "Category":
        """Validate and build a category.

        A category without an id (or with id 0) is new and stages
        CategoryCreatedEvent; reconstituted categories stage nothing.
        """
        cls._validate_name(name)
        category = cls(name, id)
        if category.is_new:
            category.add_domain_event(
                CategoryCreatedEvent(aggregate_id=category.id, name=name.value)
            )
        return category

    @property
    def name(self) -> CategoryName:
        return self._name

    def update_name(self, new_name: CategoryName) -> bool:
        """Rename the category. Returns False when the name is unchanged."""
        self._validate_name(new_name)
        if self._name == new_name:
            return False
        old_name = self._name
        self._name = new_name
        self.add_domain_event(
            CategoryUpdatedEvent(
                aggregate_id=self.id, new_name=new_name.value, old_name=old_name.value
            )
        )
        return True

    @staticmethod
    def _validate_name(name: Optional[CategoryName]) -> None:
        if name is None:
            raise ArgumentNotProvidedError("Category name is required")
        if not MIN_NAME_LENGTH <= len(name.value) <= MAX_NAME_LENGTH:
            raise ArgumentOutOfRangeError(
                f"Category name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."
            )

"""Category repository protocol."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....core.value_objects import Identifier
from .entities import Category
from .value_objects import CategoryName


class CategoryRepository(ABC):
    """Persistence contract for categories."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Insert a new category or update an existing one.

        New categories (id 0) get their id assigned in place.
        """
        ...

    @abstractmethod
    async def find_by_id(self, category_id: Identifier) -> Optional[Category]:
        ...

    @abstractmethod
    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        """Case-insensitive lookup used for uniqueness checks."""
        ...

    @abstractmethod
    async def find_all(self) -> List[Category]:
        ...

    @abstractmethod
    async def delete(self, category_id: Identifier) -> bool:
        """Remove the category. Returns False when nothing was deleted."""
        ...

"""In-memory CategoryRepository for tests and local development."""

from itertools import count
from typing import Any, Dict, List, Optional

from .....core.value_objects import Identifier
from ...core.entities import Category
from ...core.protocols import CategoryRepository
from ...core.value_objects import CategoryName
from ..records import category_from_record, category_to_record


class InMemoryCategoryRepository(CategoryRepository):
    """Stores rows, never live entities, so callers cannot mutate stored state."""

    def __init__(self):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._ids = count(1)

    async def save(self, category: Category) -> Category:
        if category.is_new:
            category.assign_id(Identifier(next(self._ids)))
        self._rows[category.id.value] = category_to_record(category)
        return category

    async def find_by_id(self, category_id: Identifier) -> Optional[Category]:
        row = self._rows.get(category_id.value)
        return category_from_record(row) if row else None

    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        wanted = name.value.lower()
        for row in self._rows.values():
            if row["name"].lower() == wanted:
                return category_from_record(row)
        return None

    async def find_all(self) -> List[Category]:
        rows = sorted(self._rows.values(), key=lambda row: row["name"])
        return [category_from_record(row) for row in rows]

    async def delete(self, category_id: Identifier) -> bool:
        return self._rows.pop(category_id.value, None) is not None

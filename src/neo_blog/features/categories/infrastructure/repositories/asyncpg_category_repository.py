"""AsyncPG implementation of CategoryRepository."""

from typing import List, Optional

from .....core.value_objects import Identifier
from .....infrastructure.database import DatabaseManager, rows_affected
from ...core.entities import Category
from ...core.protocols import CategoryRepository
from ...core.value_objects import CategoryName
from ..queries import (
    CATEGORY_DELETE,
    CATEGORY_GET_BY_ID,
    CATEGORY_GET_BY_NAME,
    CATEGORY_INSERT,
    CATEGORY_LIST,
    CATEGORY_UPDATE,
)
from ..records import category_from_record


class AsyncPGCategoryRepository(CategoryRepository):
    """PostgreSQL category storage."""

    def __init__(self, database: DatabaseManager):
        self._db = database

    async def save(self, category: Category) -> Category:
        if category.is_new:
            row = await self._db.fetchrow(CATEGORY_INSERT, category.name.value)
            category.assign_id(Identifier(row["id"]))
        else:
            await self._db.fetchrow(CATEGORY_UPDATE, category.id.value, category.name.value)
        return category

    async def find_by_id(self, category_id: Identifier) -> Optional[Category]:
        row = await self._db.fetchrow(CATEGORY_GET_BY_ID, category_id.value)
        return category_from_record(row) if row else None

    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        row = await self._db.fetchrow(CATEGORY_GET_BY_NAME, name.value)
        return category_from_record(row) if row else None

    async def find_all(self) -> List[Category]:
        rows = await self._db.fetch(CATEGORY_LIST)
        return [category_from_record(row) for row in rows]

    async def delete(self, category_id: Identifier) -> bool:
        status = await self._db.execute(CATEGORY_DELETE, category_id.value)
        return rows_affected(status) == 1

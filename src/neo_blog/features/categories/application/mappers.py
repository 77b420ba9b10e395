"""Category entity to DTO mapping."""

from typing import Iterable, List, Optional

from ..core.entities import Category
from .dtos import CategoryDto


class CategoryMapper:
    """Pure projection of Category aggregates."""

    def to_dto(self, category: Optional[Category]) -> Optional[CategoryDto]:
        if category is None:
            return None
        return CategoryDto(id=category.id.value, name=category.name.value)

    def to_dtos(self, categories: Optional[Iterable[Category]]) -> List[CategoryDto]:
        if not categories:
            return []
        return [self.to_dto(category) for category in categories]

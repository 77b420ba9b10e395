"""Get category by ID query."""

from dataclasses import dataclass
from typing import Optional

from .....core.value_objects import Identifier
from ...core.protocols import CategoryRepository
from ..dtos import CategoryDto
from ..mappers import CategoryMapper


@dataclass
class GetCategoryByIdQuery:
    """Query to fetch one category."""
    category_id: int


class GetCategoryByIdQueryHandler:
    """Handler for GetCategoryByIdQuery."""

    def __init__(self, repository: CategoryRepository, mapper: Optional[CategoryMapper] = None):
        self.repository = repository
        self.mapper = mapper or CategoryMapper()

    async def execute(self, query: GetCategoryByIdQuery) -> Optional[CategoryDto]:
        """Returns the category DTO, or None when it does not exist."""
        category = await self.repository.find_by_id(Identifier.create(query.category_id))
        return self.mapper.to_dto(category)

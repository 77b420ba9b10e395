"""List all categories query."""

from dataclasses import dataclass
from typing import List, Optional

from ...core.protocols import CategoryRepository
from ..dtos import CategoryDto
from ..mappers import CategoryMapper


@dataclass
class GetAllCategoriesQuery:
    pass


class GetAllCategoriesQueryHandler:
    def __init__(self, repository: CategoryRepository, mapper: Optional[CategoryMapper] = None):
        self.repository = repository
        self.mapper = mapper or CategoryMapper()

    async def execute(self, query: GetAllCategoriesQuery) -> List[CategoryDto]:
        return self.mapper.to_dtos(await self.repository.find_all())

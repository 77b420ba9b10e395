"""Rename category command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.exceptions import CategoryNameAlreadyExistsError, CategoryNotFoundError
from ...core.protocols import CategoryRepository
from ...core.value_objects import CategoryName
from ..dtos import CategoryDto
from ..mappers import CategoryMapper
from ..queries.get_category_by_id import GetCategoryByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class UpdateCategoryCommand:
    category_id: int
    name: str


class UpdateCategoryCommandHandler:
    """Handler for UpdateCategoryCommand.

    Renaming to the current name is a no-op: nothing is saved or published.
    A name held by the same category (for example a change of case) is not
    a conflict.
    """

    def __init__(
        self,
        repository: CategoryRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
        mapper: Optional[CategoryMapper] = None,
    ):
        self.repository = repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus
        self.mapper = mapper or CategoryMapper()

    async def execute(self, command: UpdateCategoryCommand) -> CategoryDto:
        category_id = Identifier.create(command.category_id)
        category = await self.repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"ID: {category_id.value}")

        new_name = CategoryName.create(command.name)
        if category.name == new_name:
            category.clear_events()
            return self.mapper.to_dto(category)

        holder = await self.repository.find_by_name(new_name)
        if holder is not None and holder.id != category.id:
            raise CategoryNameAlreadyExistsError(new_name.value)

        category.update_name(new_name)
        await save_and_publish(self.repository, category, self.event_publisher)
        logger.info(f"Renamed category {category_id.value} to {new_name.value}")

        dto = await self.query_bus.execute(GetCategoryByIdQuery(category_id.value))
        return require_read_model(dto, "category", category_id.value)

"""Create category command."""

import logging
from dataclasses import dataclass

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher
from ...core.entities import Category
from ...core.exceptions import CategoryNameAlreadyExistsError
from ...core.protocols import CategoryRepository
from ...core.value_objects import CategoryName
from ..dtos import CategoryDto
from ..queries.get_category_by_id import GetCategoryByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryCommand:
    """Command to create a new category."""
    name: str


class CreateCategoryCommandHandler:
    """Handler for CreateCategoryCommand."""

    def __init__(
        self,
        repository: CategoryRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
    ):
        self.repository = repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus

    async def execute(self, command: CreateCategoryCommand) -> CategoryDto:
        """
        Execute the create category command.

        Args:
            command: Command to execute

        Returns:
            The stored category as read back through the query bus

        Raises:
            DomainValidationError: If the name is invalid
            CategoryNameAlreadyExistsError: If the name is taken
            PostConditionError: If the new category cannot be read back
        """
        name = CategoryName.create(command.name)

        if await self.repository.find_by_name(name) is not None:
            raise CategoryNameAlreadyExistsError(name.value)

        category = Category.create(name)
        saved = await save_and_publish(self.repository, category, self.event_publisher)
        logger.info(f"Created category {saved.id.value} ({name.value})")

        dto = await self.query_bus.execute(GetCategoryByIdQuery(saved.id.value))
        return require_read_model(dto, "category", saved.id.value, created=True)

"""Delete category command."""

import logging
from dataclasses import dataclass

from .....application import DeleteResultDto
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ....posts.core.protocols import FindPostQuery, PostRepository
from ...core.events import CategoryDeletedEvent
from ...core.exceptions import CategoryInUseError, CategoryNotFoundError
from ...core.protocols import CategoryRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteCategoryCommand:
    category_id: int


class DeleteCategoryCommandHandler:
    """Handler for DeleteCategoryCommand.

    A category that is still attached to any post cannot be deleted.
    """

    def __init__(
        self,
        repository: CategoryRepository,
        post_repository: PostRepository,
        event_publisher: EventPublisher,
    ):
        self.repository = repository
        self.post_repository = post_repository
        self.event_publisher = event_publisher

    async def execute(self, command: DeleteCategoryCommand) -> DeleteResultDto:
        """
        Execute the delete category command.

        Returns:
            DeleteResultDto with success False if the repository deleted nothing

        Raises:
            CategoryNotFoundError: If the category does not exist
            CategoryInUseError: If posts still reference the category
        """
        category_id = Identifier.create(command.category_id)
        category = await self.repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category with ID {category_id.value} not found for deletion.")

        post_count = await self.post_repository.count(FindPostQuery(category_id=category_id))
        if post_count > 0:
            logger.warning(
                f"Refusing to delete category {category_id.value}: used by {post_count} post(s)"
            )
            raise CategoryInUseError(category_id.value)

        deleted = await self.repository.delete(category_id)
        if deleted:
            await self.event_publisher.publish(CategoryDeletedEvent(aggregate_id=category_id))
            logger.info(f"Deleted category {category_id.value}")
        else:
            logger.warning(
                f"Category {category_id.value} was found but not deleted, possibly already deleted"
            )
        return DeleteResultDto(success=deleted)

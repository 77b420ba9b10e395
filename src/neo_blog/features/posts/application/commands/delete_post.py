"""Delete post command."""

import logging
from dataclasses import dataclass

from .....application import DeleteResultDto
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.events import PostDeletedEvent
from ...core.exceptions import PostNotFoundError
from ...core.protocols import PostRepository

logger = logging.getLogger(__name__)


@dataclass
class DeletePostCommand:
    post_id: int


class DeletePostCommandHandler:
    def __init__(self, repository: PostRepository, event_publisher: EventPublisher):
        self.repository = repository
        self.event_publisher = event_publisher

    async def execute(self, command: DeletePostCommand) -> DeleteResultDto:
        post_id = Identifier.create(command.post_id)
        if await self.repository.find_by_id(post_id) is None:
            raise PostNotFoundError(f"Post with ID {post_id.value} not found for deletion.")

        deleted = await self.repository.delete(post_id)
        if deleted:
            await self.event_publisher.publish(PostDeletedEvent(aggregate_id=post_id))
            logger.info(f"Deleted post {post_id.value}")
        else:
            logger.warning(f"Post {post_id.value} was found but not deleted, possibly already deleted")
        return DeleteResultDto(success=deleted)

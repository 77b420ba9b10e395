"""Delete user command."""

import logging
from dataclasses import dataclass

from .....application import DeleteResultDto
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.events import UserDeletedEvent
from ...core.exceptions import UserNotFoundError
from ...core.protocols import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteUserCommand:
    user_id: int


class DeleteUserCommandHandler:
    def __init__(self, repository: UserRepository, event_publisher: EventPublisher):
        self.repository = repository
        self.event_publisher = event_publisher

    async def execute(self, command: DeleteUserCommand) -> DeleteResultDto:
        user_id = Identifier.create(command.user_id)
        if await self.repository.find_by_id(user_id) is None:
            raise UserNotFoundError(f"ID: {user_id.value}")

        deleted = await self.repository.delete(user_id)
        if deleted:
            await self.event_publisher.publish(UserDeletedEvent(aggregate_id=user_id))
            logger.info(f"Deleted user {user_id.value}")
        else:
            logger.warning(f"User {user_id.value} was found but not deleted, possibly already deleted")
        return DeleteResultDto(success=deleted)

"""Delete reply command."""

import logging
from dataclasses import dataclass

from .....application import DeleteResultDto
from .....core.exceptions import ForbiddenError
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.events import CommentResponseDeletedEvent, ResponseRemovedFromCommentEvent
from ...core.exceptions import CommentResponseNotFoundError
from ...core.protocols import CommentResponseRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteCommentResponseCommand:
    response_id: int
    requester_id: int


class DeleteCommentResponseCommandHandler:
    def __init__(self, repository: CommentResponseRepository, event_publisher: EventPublisher):
        self.repository = repository
        self.event_publisher = event_publisher

    async def execute(self, command: DeleteCommentResponseCommand) -> DeleteResultDto:
        response_id = Identifier.create(command.response_id)
        requester_id = Identifier.create(command.requester_id)

        response = await self.repository.find_by_id(response_id)
        if response is None:
            raise CommentResponseNotFoundError(
                f"Comment Response with ID {response_id.value} not found for deletion."
            )
        if not response.is_authored_by(requester_id):
            raise ForbiddenError("You are not allowed to delete this response.")

        deleted = await self.repository.delete(response_id)
        if deleted:
            await self.event_publisher.publish_all([
                CommentResponseDeletedEvent(aggregate_id=response_id, comment_id=response.comment_id),
                ResponseRemovedFromCommentEvent(
                    aggregate_id=response.comment_id, response_id=response_id
                ),
            ])
            logger.info(f"Deleted reply {response_id.value} from comment {response.comment_id.value}")
        else:
            logger.warning(f"Reply {response_id.value} was found but not deleted")
        return DeleteResultDto(success=deleted)

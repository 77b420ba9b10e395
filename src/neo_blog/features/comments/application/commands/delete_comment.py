"""Delete comment command."""

import logging
from dataclasses import dataclass

from .....application import DeleteResultDto
from .....core.exceptions import ForbiddenError
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.events import CommentDeletedEvent
from ...core.exceptions import CommentNotFoundError
from ...core.protocols import CommentRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteCommentCommand:
    """Delete a comment and its replies; only its author may do so."""
    comment_id: int
    requester_id: int


class DeleteCommentCommandHandler:
    def __init__(self, repository: CommentRepository, event_publisher: EventPublisher):
        self.repository = repository
        self.event_publisher = event_publisher

    async def execute(self, command: DeleteCommentCommand) -> DeleteResultDto:
        comment_id = Identifier.create(command.comment_id)
        requester_id = Identifier.create(command.requester_id)

        comment = await self.repository.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(f"Comment with ID {comment_id.value} not found for deletion.")
        if not comment.is_authored_by(requester_id):
            raise ForbiddenError("You are not allowed to delete this comment.")

        deleted = await self.repository.delete(comment_id)
        if deleted:
            await self.event_publisher.publish(
                CommentDeletedEvent(aggregate_id=comment_id, post_id=comment.post_id)
            )
            logger.info(f"Deleted comment {comment_id.value} with {len(comment.responses)} replies")
        else:
            logger.warning(f"Comment {comment_id.value} was found but not deleted")
        return DeleteResultDto(success=deleted)

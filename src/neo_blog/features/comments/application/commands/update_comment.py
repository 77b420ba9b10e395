"""Update comment command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.exceptions import ForbiddenError
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.exceptions import CommentNotFoundError
from ...core.protocols import CommentRepository
from ...core.value_objects import CommentContent
from ..dtos import CommentDto
from ..mappers import CommentMapper
from ..queries.get_comment_by_id import GetCommentByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class UpdateCommentCommand:
    """Edit a comment; only its author may do so."""
    comment_id: int
    content: str
    requester_id: int


class UpdateCommentCommandHandler:
    def __init__(
        self,
        repository: CommentRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
        mapper: Optional[CommentMapper] = None,
    ):
        self.repository = repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus
        self.mapper = mapper or CommentMapper()

    async def execute(self, command: UpdateCommentCommand) -> CommentDto:
        comment_id = Identifier.create(command.comment_id)
        requester_id = Identifier.create(command.requester_id)

        comment = await self.repository.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(f"ID: {comment_id.value}")
        if not comment.is_authored_by(requester_id):
            raise ForbiddenError("You are not allowed to update this comment.")

        if not comment.update_content(CommentContent.create(command.content)):
            comment.clear_events()
            return self.mapper.to_dto(comment)

        await save_and_publish(self.repository, comment, self.event_publisher)
        logger.info(f"Updated comment {comment_id.value}")

        dto = await self.query_bus.execute(GetCommentByIdQuery(comment_id.value))
        return require_read_model(dto, "comment", comment_id.value)

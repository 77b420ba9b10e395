"""Update reply command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.exceptions import ForbiddenError
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.exceptions import CommentResponseNotFoundError
from ...core.protocols import CommentResponseRepository
from ...core.value_objects import CommentContent
from ..dtos import CommentResponseDto
from ..mappers import CommentResponseMapper
from ..queries.get_comment_response_by_id import GetCommentResponseByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class UpdateCommentResponseCommand:
    response_id: int
    content: str
    requester_id: int


class UpdateCommentResponseCommandHandler:
    def __init__(
        self,
        repository: CommentResponseRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
        mapper: Optional[CommentResponseMapper] = None,
    ):
        self.repository = repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus
        self.mapper = mapper or CommentResponseMapper()

    async def execute(self, command: UpdateCommentResponseCommand) -> CommentResponseDto:
        response_id = Identifier.create(command.response_id)
        requester_id = Identifier.create(command.requester_id)

        response = await self.repository.find_by_id(response_id)
        if response is None:
            raise CommentResponseNotFoundError(f"ID: {response_id.value}")
        if not response.is_authored_by(requester_id):
            raise ForbiddenError("You are not allowed to update this response.")

        if not response.update_content(CommentContent.create(command.content)):
            response.clear_events()
            return self.mapper.to_dto(response)

        await save_and_publish(self.repository, response, self.event_publisher)
        logger.info(f"Updated reply {response_id.value}")

        dto = await self.query_bus.execute(GetCommentResponseByIdQuery(response_id.value))
        return require_read_model(dto, "comment response", response_id.value)

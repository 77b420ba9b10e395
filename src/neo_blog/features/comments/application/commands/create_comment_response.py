"""Reply to a comment."""

import asyncio
import logging
from dataclasses import dataclass

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ....users.core.exceptions import UserNotFoundError
from ....users.core.protocols import UserRepository
from ...core.entities import CommentResponse
from ...core.exceptions import ParentCommentNotFoundError
from ...core.protocols import CommentRepository, CommentResponseRepository
from ...core.value_objects import CommentContent
from ..dtos import CommentResponseDto
from ..queries.get_comment_response_by_id import GetCommentResponseByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class CreateCommentResponseCommand:
    comment_id: int
    content: str
    author_id: int


class CreateCommentResponseCommandHandler:
    """Handler for CreateCommentResponseCommand.

    The reply inherits its post from the parent comment. After the reply is
    stored the parent comment stages and publishes
    CommentResponseAddedToCommentEvent; the comment row itself is unchanged.
    """

    def __init__(
        self,
        repository: CommentResponseRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
    ):
        self.repository = repository
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus

    async def execute(self, command: CreateCommentResponseCommand) -> CommentResponseDto:
        comment_id = Identifier.create(command.comment_id)
        author_id = Identifier.create(command.author_id)

        comment, author = await asyncio.gather(
            self.comment_repository.find_by_id(comment_id),
            self.user_repository.find_by_id(author_id),
        )
        if comment is None:
            raise ParentCommentNotFoundError(f"ID: {comment_id.value}")
        if author is None:
            raise UserNotFoundError(f"Author with ID {author_id.value} not found.")

        response = CommentResponse.create(
            content=CommentContent.create(command.content),
            author_id=author_id,
            comment_id=comment_id,
            post_id=comment.post_id,
        )
        saved = await save_and_publish(self.repository, response, self.event_publisher)

        comment.add_response(saved)
        await comment.publish_events(self.event_publisher)
        logger.info(f"Created reply {saved.id.value} on comment {comment_id.value}")

        dto = await self.query_bus.execute(GetCommentResponseByIdQuery(saved.id.value))
        return require_read_model(dto, "comment response", saved.id.value, created=True)

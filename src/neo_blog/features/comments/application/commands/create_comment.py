"""Create comment command."""

import asyncio
import logging
from dataclasses import dataclass

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ....posts.core.protocols import PostRepository
from ....users.core.exceptions import UserNotFoundError
from ....users.core.protocols import UserRepository
from ...core.entities import Comment
from ...core.exceptions import PostNotFoundForCommentError
from ...core.protocols import CommentRepository
from ...core.value_objects import CommentContent
from ..dtos import CommentDto
from ..queries.get_comment_by_id import GetCommentByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class CreateCommentCommand:
    content: str
    post_id: int
    author_id: int


class CreateCommentCommandHandler:
    """Handler for CreateCommentCommand."""

    def __init__(
        self,
        repository: CommentRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
    ):
        self.repository = repository
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus

    async def execute(self, command: CreateCommentCommand) -> CommentDto:
        """
        Execute the create comment command.

        Raises:
            UserNotFoundError: If the author does not exist
            PostNotFoundForCommentError: If the post does not exist
            DomainValidationError: If the content is invalid
            PostConditionError: If the new comment cannot be read back
        """
        author_id = Identifier.create(command.author_id)
        post_id = Identifier.create(command.post_id)

        author, post = await asyncio.gather(
            self.user_repository.find_by_id(author_id),
            self.post_repository.find_by_id(post_id),
        )
        if author is None:
            raise UserNotFoundError(f"Author with ID {author_id.value} not found.")
        if post is None:
            raise PostNotFoundForCommentError(f"ID: {post_id.value}")

        comment = Comment.create(
            content=CommentContent.create(command.content),
            post_id=post_id,
            author_id=author_id,
        )
        saved = await save_and_publish(self.repository, comment, self.event_publisher)
        logger.info(f"Created comment {saved.id.value} on post {post_id.value}")

        dto = await self.query_bus.execute(GetCommentByIdQuery(saved.id.value))
        return require_read_model(dto, "comment", saved.id.value, created=True)

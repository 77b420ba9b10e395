"""Unpublish post command."""

import logging
from dataclasses import dataclass

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ...core.exceptions import PostNotFoundError
from ...core.protocols import PostRepository
from ..dtos import PostDto
from ..queries.get_post_by_id import GetPostByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class UnpublishPostCommand:
    post_id: int


class UnpublishPostCommandHandler:
    """Moves a published post back to draft."""

    def __init__(self, repository: PostRepository, event_publisher: EventPublisher, query_bus: QueryBus):
        self.repository = repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus

    async def execute(self, command: UnpublishPostCommand) -> PostDto:
        post_id = Identifier.create(command.post_id)
        post = await self.repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(f"ID: {post_id.value}")

        post.unpublish()
        await save_and_publish(self.repository, post, self.event_publisher)
        logger.info(f"Unpublished post {post_id.value}")

        dto = await self.query_bus.execute(GetPostByIdQuery(post_id.value))
        return require_read_model(dto, "post", post_id.value)

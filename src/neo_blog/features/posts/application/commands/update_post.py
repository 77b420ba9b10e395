"""Update post command."""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ....categories.core.protocols import CategoryRepository
from ...core.exceptions import PostNotFoundError
from ...core.protocols import PostRepository
from ...core.value_objects import PostContent, PostTitle
from ..dtos import PostDto
from ..mappers import PostMapper
from ..queries.get_post_by_id import GetPostByIdQuery
from .create_post import raise_for_missing_categories

logger = logging.getLogger(__name__)


@dataclass
class UpdatePostCommand:
    """Partial post update; ``None`` leaves a field untouched.

    ``category_ids`` replaces the whole category set. ``published`` moves
    the post through publish/unpublish when it differs from the current
    state.
    """

    post_id: int
    title: Optional[str] = None
    content: Optional[str] = None
    category_ids: Optional[List[int]] = None
    published: Optional[bool] = None


class UpdatePostCommandHandler:
    """Handler for UpdatePostCommand."""

    def __init__(
        self,
        repository: PostRepository,
        category_repository: CategoryRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
        mapper: Optional[PostMapper] = None,
    ):
        self.repository = repository
        self.category_repository = category_repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus
        self.mapper = mapper or PostMapper()

    async def execute(self, command: UpdatePostCommand) -> PostDto:
        post_id = Identifier.create(command.post_id)
        post = await self.repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(f"ID: {post_id.value}")

        changed = False

        if command.title is not None:
            changed |= post.update_title(PostTitle.create(command.title))

        if command.content is not None:
            changed |= post.update_content(PostContent.create(command.content))

        if command.category_ids is not None:
            category_ids = [Identifier.create(category_id) for category_id in command.category_ids]
            found = await asyncio.gather(
                *(self.category_repository.find_by_id(category_id) for category_id in category_ids)
            )
            raise_for_missing_categories(category_ids, found)
            changed |= post.replace_categories(category_ids)

        if command.published is not None and command.published != post.published:
            if command.published:
                post.publish()
            else:
                post.unpublish()
            changed = True

        if not changed:
            post.clear_events()
            return self.mapper.to_dto(post)

        await save_and_publish(self.repository, post, self.event_publisher)
        logger.info(f"Updated post {post_id.value}")

        dto = await self.query_bus.execute(GetPostByIdQuery(post_id.value))
        return require_read_model(dto, "post", post_id.value)

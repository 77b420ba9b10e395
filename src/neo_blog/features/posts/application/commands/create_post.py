"""Create post command."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher
from .....core.value_objects import Identifier
from ....categories.core.exceptions import CategoryNotFoundError
from ....categories.core.protocols import CategoryRepository
from ....users.core.exceptions import UserNotFoundError
from ....users.core.protocols import UserRepository
from ...core.entities import Post
from ...core.protocols import PostRepository
from ...core.value_objects import PostContent, PostTitle
from ..dtos import PostDto
from ..queries.get_post_by_id import GetPostByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class CreatePostCommand:
    """Command to create a draft post."""
    title: str
    content: str
    author_id: int
    category_ids: List[int] = field(default_factory=list)


def raise_for_missing_categories(category_ids: Sequence[Identifier], found: Sequence[object]) -> None:
    """Raise CategoryNotFoundError for the first id whose lookup came back empty."""
    for category_id, category in zip(category_ids, found):
        if category is None:
            raise CategoryNotFoundError(f"ID: {category_id.value}")


class CreatePostCommandHandler:
    """Handler for CreatePostCommand."""

    def __init__(
        self,
        repository: PostRepository,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
    ):
        self.repository = repository
        self.user_repository = user_repository
        self.category_repository = category_repository
        self.event_publisher = event_publisher
        self.query_bus = query_bus

    async def execute(self, command: CreatePostCommand) -> PostDto:
        """
        Execute the create post command.

        The author and every category are looked up concurrently before any
        value object is built.

        Raises:
            UserNotFoundError: If the author does not exist
            CategoryNotFoundError: If a category does not exist
            DomainValidationError: If title or content are invalid
            PostConditionError: If the new post cannot be read back
        """
        author_id = Identifier.create(command.author_id)
        category_ids = [Identifier.create(category_id) for category_id in command.category_ids]

        author, *categories = await asyncio.gather(
            self.user_repository.find_by_id(author_id),
            *(self.category_repository.find_by_id(category_id) for category_id in category_ids),
        )
        if author is None:
            raise UserNotFoundError(f"Author with ID {author_id.value} not found.")
        raise_for_missing_categories(category_ids, categories)

        post = Post.create(
            title=PostTitle.create(command.title),
            content=PostContent.create(command.content),
            author_id=author_id,
            category_ids=category_ids,
        )
        saved = await save_and_publish(self.repository, post, self.event_publisher)
        logger.info(f"Created post {saved.id.value} for author {author_id.value}")

        dto = await self.query_bus.execute(GetPostByIdQuery(saved.id.value))
        return require_read_model(dto, "post", saved.id.value, created=True)

"""Filtered, paginated post listing."""

from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import ArgumentOutOfRangeError
from .....core.value_objects import Identifier
from ...core.protocols import FindPostQuery, PostRepository
from ..dtos import PostListDto
from ..mappers import PostMapper

DEFAULT_SKIP = 0
DEFAULT_TAKE = 10


@dataclass
class GetPostsQuery:
    """Query for a page of posts.

    Unset filters match everything; unset paging falls back to skip=0,
    take=10.
    """

    published: Optional[bool] = None
    author_id: Optional[int] = None
    category_id: Optional[int] = None
    skip: Optional[int] = None
    take: Optional[int] = None

    def __post_init__(self):
        """Validate query data."""
        if self.skip is not None and self.skip < 0:
            raise ArgumentOutOfRangeError("skip cannot be negative")
        if self.take is not None and self.take <= 0:
            raise ArgumentOutOfRangeError("take must be positive")


class GetPostsQueryHandler:
    """Handler for GetPostsQuery."""

    def __init__(self, repository: PostRepository, mapper: Optional[PostMapper] = None):
        self.repository = repository
        self.mapper = mapper or PostMapper()

    async def execute(self, query: GetPostsQuery) -> PostListDto:
        """
        Execute the list query.

        Args:
            query: Filters and paging

        Returns:
            The page plus ``total`` (unpaged match count) and ``has_more``
        """
        skip = DEFAULT_SKIP if query.skip is None else query.skip
        take = DEFAULT_TAKE if query.take is None else query.take

        filters = FindPostQuery(
            published=query.published,
            author_id=Identifier.create(query.author_id) if query.author_id is not None else None,
            category_id=Identifier.create(query.category_id) if query.category_id is not None else None,
            skip=skip,
            take=take,
        )

        posts = await self.repository.find(filters)
        total = await self.repository.count(filters.without_paging())

        return PostListDto(
            posts=self.mapper.to_dtos(posts),
            total=total,
            skip=skip,
            take=take,
            has_more=skip + take < total,
        )

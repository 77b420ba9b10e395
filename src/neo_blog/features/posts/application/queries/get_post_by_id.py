"""Get post by ID query."""

from dataclasses import dataclass
from typing import Optional

from .....core.value_objects import Identifier
from ...core.protocols import PostRepository
from ..dtos import PostDto
from ..mappers import PostMapper


@dataclass
class GetPostByIdQuery:
    post_id: int


class GetPostByIdQueryHandler:
    """Handler for GetPostByIdQuery. Returns None for unknown ids."""

    def __init__(self, repository: PostRepository, mapper: Optional[PostMapper] = None):
        self.repository = repository
        self.mapper = mapper or PostMapper()

    async def execute(self, query: GetPostByIdQuery) -> Optional[PostDto]:
        post = await self.repository.find_by_id(Identifier.create(query.post_id))
        return self.mapper.to_dto(post)

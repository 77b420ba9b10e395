"""Get comments by post query."""

from dataclasses import dataclass
from typing import List, Optional

from .....core.value_objects import Identifier
from ...core.protocols import CommentRepository
from ..dtos import CommentDto
from ..mappers import CommentMapper


@dataclass
class GetCommentsByPostQuery:
    post_id: int


class GetCommentsByPostQueryHandler:
    def __init__(self, repository: CommentRepository, mapper: Optional[CommentMapper] = None):
        self.repository = repository
        self.mapper = mapper or CommentMapper()

    async def execute(self, query: GetCommentsByPostQuery) -> List[CommentDto]:
        comments = await self.repository.find_by_post_id(Identifier.create(query.post_id))
        return self.mapper.to_dtos(comments)

"""Get comment by ID query."""

from dataclasses import dataclass
from typing import Optional

from .....core.value_objects import Identifier
from ...core.protocols import CommentRepository
from ..dtos import CommentDto
from ..mappers import CommentMapper


@dataclass
class GetCommentByIdQuery:
    comment_id: int


class GetCommentByIdQueryHandler:
    """Handler for GetCommentByIdQuery. Replies are nested in the result."""

    def __init__(self, repository: CommentRepository, mapper: Optional[CommentMapper] = None):
        self.repository = repository
        self.mapper = mapper or CommentMapper()

    async def execute(self, query: GetCommentByIdQuery) -> Optional[CommentDto]:
        comment = await self.repository.find_by_id(Identifier.create(query.comment_id))
        return self.mapper.to_dto(comment)

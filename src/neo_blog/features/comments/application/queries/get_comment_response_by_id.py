"""Get reply by ID query."""

from dataclasses import dataclass
from typing import Optional

from .....core.value_objects import Identifier
from ...core.protocols import CommentResponseRepository
from ..dtos import CommentResponseDto
from ..mappers import CommentResponseMapper


@dataclass
class GetCommentResponseByIdQuery:
    response_id: int


class GetCommentResponseByIdQueryHandler:
    def __init__(
        self,
        repository: CommentResponseRepository,
        mapper: Optional[CommentResponseMapper] = None,
    ):
        self.repository = repository
        self.mapper = mapper or CommentResponseMapper()

    async def execute(self, query: GetCommentResponseByIdQuery) -> Optional[CommentResponseDto]:
        response = await self.repository.find_by_id(Identifier.create(query.response_id))
        return self.mapper.to_dto(response)

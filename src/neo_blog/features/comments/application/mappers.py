"""Comment entity to DTO mapping."""

from typing import Iterable, List, Optional

from ..core.entities import Comment, CommentResponse
from .dtos import CommentDto, CommentResponseDto


class CommentResponseMapper:
    def to_dto(self, response: Optional[CommentResponse]) -> Optional[CommentResponseDto]:
        if response is None:
            return None
        return CommentResponseDto(
            id=response.id.value,
            content=response.content.value,
            author_id=response.author_id.value,
            comment_id=response.comment_id.value,
            post_id=response.post_id.value,
            created_at=response.created_at,
            updated_at=response.updated_at,
        )

    def to_dtos(self, responses: Optional[Iterable[CommentResponse]]) -> List[CommentResponseDto]:
        if not responses:
            return []
        return [self.to_dto(response) for response in responses]


class CommentMapper:
    """Maps comments with their replies nested."""

    def __init__(self, response_mapper: Optional[CommentResponseMapper] = None):
        self.response_mapper = response_mapper or CommentResponseMapper()

    def to_dto(self, comment: Optional[Comment]) -> Optional[CommentDto]:
        if comment is None:
            return None
        return CommentDto(
            id=comment.id.value,
            content=comment.content.value,
            author_id=comment.author_id.value,
            post_id=comment.post_id.value,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=self.response_mapper.to_dtos(comment.responses),
        )

    def to_dtos(self, comments: Optional[Iterable[Comment]]) -> List[CommentDto]:
        if not comments:
            return []
        return [self.to_dto(comment) for comment in comments]

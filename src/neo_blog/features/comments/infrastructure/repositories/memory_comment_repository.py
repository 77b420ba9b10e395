"""In-memory comment and reply repositories for tests and local development."""

from itertools import count
from typing import Any, Dict, List, Optional

from .....core.value_objects import Identifier
from ...core.entities import Comment, CommentResponse
from ...core.protocols import CommentRepository, CommentResponseRepository
from ..records import (
    comment_from_record,
    comment_to_record,
    response_from_record,
    response_to_record,
)


def _oldest_first(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(rows, key=lambda row: (row["created_at"], row["id"]))


class InMemoryCommentResponseRepository(CommentResponseRepository):
    def __init__(self):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._ids = count(1)

    async def save(self, response: CommentResponse) -> CommentResponse:
        if response.is_new:
            response.assign_id(Identifier(next(self._ids)))
        self._rows[response.id.value] = response_to_record(response)
        return response

    async def find_by_id(self, response_id: Identifier) -> Optional[CommentResponse]:
        row = self._rows.get(response_id.value)
        return response_from_record(row) if row else None

    async def find_by_comment_id(self, comment_id: Identifier) -> List[CommentResponse]:
        rows = [row for row in self._rows.values() if row["comment_id"] == comment_id.value]
        return [response_from_record(row) for row in _oldest_first(rows)]

    async def delete(self, response_id: Identifier) -> bool:
        return self._rows.pop(response_id.value, None) is not None

    def _remove_where(self, column: str, value: int) -> int:
        doomed = [key for key, row in self._rows.items() if row[column] == value]
        for key in doomed:
            del self._rows[key]
        return len(doomed)

    def remove_for_comment(self, comment_id: Identifier) -> int:
        """Drop every reply of a comment; returns how many were removed."""
        return self._remove_where("comment_id", comment_id.value)

    def remove_for_author(self, author_id: Identifier) -> int:
        return self._remove_where("author_id", author_id.value)


class InMemoryCommentRepository(CommentRepository):
    """Comment store that reads replies from, and cascades into, a reply store."""

    def __init__(self, response_repository: Optional[InMemoryCommentResponseRepository] = None):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._ids = count(1)
        self.responses = response_repository or InMemoryCommentResponseRepository()

    async def save(self, comment: Comment) -> Comment:
        if comment.is_new:
            comment.assign_id(Identifier(next(self._ids)))
        self._rows[comment.id.value] = comment_to_record(comment)
        return comment

    async def _load(self, row: Dict[str, Any]) -> Comment:
        replies = await self.responses.find_by_comment_id(Identifier(row["id"]))
        return comment_from_record(row, replies)

    async def find_by_id(self, comment_id: Identifier) -> Optional[Comment]:
        row = self._rows.get(comment_id.value)
        return await self._load(row) if row else None

    async def find_by_post_id(self, post_id: Identifier) -> List[Comment]:
        rows = [row for row in self._rows.values() if row["post_id"] == post_id.value]
        return [await self._load(row) for row in _oldest_first(rows)]

    async def delete(self, comment_id: Identifier) -> bool:
        if self._rows.pop(comment_id.value, None) is None:
            return False
        self.responses.remove_for_comment(comment_id)
        return True

    def remove_for_post(self, post_id: Identifier) -> int:
        """Drop every comment of a post and all replies on the post."""
        return self._remove_cascading("post_id", post_id)

    def remove_for_author(self, author_id: Identifier) -> int:
        """Drop a user's comments with their replies, and the user's own replies."""
        removed = self._remove_cascading("author_id", author_id)
        self.responses.remove_for_author(author_id)
        return removed

    def _remove_cascading(self, column: str, value: Identifier) -> int:
        doomed = [key for key, row in self._rows.items() if row[column] == value.value]
        for key in doomed:
            del self._rows[key]
            self.responses.remove_for_comment(Identifier(key))
        return len(doomed)

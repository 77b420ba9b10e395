"""AsyncPG implementations of the comment and reply repositories."""

from collections import defaultdict
from typing import Dict, List, Optional

from .....core.value_objects import Identifier
from .....infrastructure.database import DatabaseManager, rows_affected
from ...core.entities import Comment, CommentResponse
from ...core.protocols import CommentRepository, CommentResponseRepository
from ..queries import (
    COMMENT_DELETE,
    COMMENT_GET_BY_ID,
    COMMENT_INSERT,
    COMMENT_LIST_BY_POST,
    COMMENT_UPDATE,
    RESPONSE_DELETE,
    RESPONSE_GET_BY_ID,
    RESPONSE_INSERT,
    RESPONSE_LIST_BY_COMMENT,
    RESPONSE_LIST_BY_COMMENTS,
    RESPONSE_UPDATE,
)
from ..records import comment_from_record, response_from_record


class AsyncPGCommentResponseRepository(CommentResponseRepository):
    """PostgreSQL reply storage."""

    def __init__(self, database: DatabaseManager):
        self._db = database

    async def save(self, response: CommentResponse) -> CommentResponse:
        if response.is_new:
            row = await self._db.fetchrow(
                RESPONSE_INSERT,
                response.content.value,
                response.comment_id.value,
                response.post_id.value,
                response.author_id.value,
                response.created_at,
                response.updated_at,
            )
            response.assign_id(Identifier(row["id"]))
        else:
            await self._db.execute(
                RESPONSE_UPDATE, response.id.value, response.content.value, response.updated_at
            )
        return response

    async def find_by_id(self, response_id: Identifier) -> Optional[CommentResponse]:
        row = await self._db.fetchrow(RESPONSE_GET_BY_ID, response_id.value)
        return response_from_record(row) if row else None

    async def find_by_comment_id(self, comment_id: Identifier) -> List[CommentResponse]:
        rows = await self._db.fetch(RESPONSE_LIST_BY_COMMENT, comment_id.value)
        return [response_from_record(row) for row in rows]

    async def delete(self, response_id: Identifier) -> bool:
        status = await self._db.execute(RESPONSE_DELETE, response_id.value)
        return rows_affected(status) == 1


class AsyncPGCommentRepository(CommentRepository):
    """PostgreSQL comment storage; reads load replies in a second query."""

    def __init__(self, database: DatabaseManager):
        self._db = database

    async def save(self, comment: Comment) -> Comment:
        if comment.is_new:
            row = await self._db.fetchrow(
                COMMENT_INSERT,
                comment.content.value,
                comment.post_id.value,
                comment.author_id.value,
                comment.created_at,
                comment.updated_at,
            )
            comment.assign_id(Identifier(row["id"]))
        else:
            await self._db.execute(
                COMMENT_UPDATE, comment.id.value, comment.content.value, comment.updated_at
            )
        return comment

    async def find_by_id(self, comment_id: Identifier) -> Optional[Comment]:
        row = await self._db.fetchrow(COMMENT_GET_BY_ID, comment_id.value)
        if not row:
            return None
        reply_rows = await self._db.fetch(RESPONSE_LIST_BY_COMMENT, comment_id.value)
        return comment_from_record(row, [response_from_record(r) for r in reply_rows])

    async def find_by_post_id(self, post_id: Identifier) -> List[Comment]:
        rows = await self._db.fetch(COMMENT_LIST_BY_POST, post_id.value)
        if not rows:
            return []

        replies: Dict[int, List[CommentResponse]] = defaultdict(list)
        reply_rows = await self._db.fetch(RESPONSE_LIST_BY_COMMENTS, [row["id"] for row in rows])
        for reply_row in reply_rows:
            replies[reply_row["comment_id"]].append(response_from_record(reply_row))

        return [comment_from_record(row, replies[row["id"]]) for row in rows]

    async def delete(self, comment_id: Identifier) -> bool:
        status = await self._db.execute(COMMENT_DELETE, comment_id.value)
        return rows_affected(status) == 1

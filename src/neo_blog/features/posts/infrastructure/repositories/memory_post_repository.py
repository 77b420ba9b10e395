"""In-memory PostRepository for tests and local development."""

from itertools import count
from typing import Any, Dict, List, Optional

from .....core.value_objects import Identifier
from ...core.entities import Post
from ...core.protocols import FindPostQuery, PostRepository
from ..records import post_from_record, post_to_record


def _matches(row: Dict[str, Any], query: FindPostQuery) -> bool:
    if query.published is not None and row["published"] != query.published:
        return False
    if query.author_id is not None and row["author_id"] != query.author_id.value:
        return False
    if query.category_id is not None and query.category_id.value not in row["category_ids"]:
        return False
    return True


class InMemoryPostRepository(PostRepository):
    """Post store; deletes cascade into the comment store when one is attached."""

    def __init__(self, comment_repository=None):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._ids = count(1)
        self.comments = comment_repository

    async def save(self, post: Post) -> Post:
        if post.is_new:
            post.assign_id(Identifier(next(self._ids)))
        self._rows[post.id.value] = post_to_record(post)
        return post

    async def find_by_id(self, post_id: Identifier) -> Optional[Post]:
        row = self._rows.get(post_id.value)
        return post_from_record(row) if row else None

    def _filtered(self, query: FindPostQuery) -> List[Dict[str, Any]]:
        return [row for row in self._rows.values() if _matches(row, query)]

    async def find(self, query: FindPostQuery) -> List[Post]:
        rows = sorted(
            self._filtered(query),
            key=lambda row: (row["created_at"], row["id"]),
            reverse=True,
        )
        start = query.skip or 0
        end = start + query.take if query.take is not None else None
        return [post_from_record(row) for row in rows[start:end]]

    async def count(self, query: FindPostQuery) -> int:
        return len(self._filtered(query))

    async def delete(self, post_id: Identifier) -> bool:
        if self._rows.pop(post_id.value, None) is None:
            return False
        if self.comments is not None:
            self.comments.remove_for_post(post_id)
        return True

    def remove_for_author(self, author_id: Identifier) -> int:
        """Drop every post of an author together with its comments."""
        doomed = [key for key, row in self._rows.items() if row["author_id"] == author_id.value]
        for key in doomed:
            del self._rows[key]
            if self.comments is not None:
                self.comments.remove_for_post(Identifier(key))
        return len(doomed)

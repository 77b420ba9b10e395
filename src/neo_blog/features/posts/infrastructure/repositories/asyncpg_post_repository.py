"""AsyncPG implementation of PostRepository."""

from typing import List, Optional

from .....core.value_objects import Identifier
from .....infrastructure.database import DatabaseManager, rows_affected
from ...core.entities import Post
from ...core.protocols import FindPostQuery, PostRepository
from ..queries import (
    POST_CATEGORIES_CLEAR,
    POST_CATEGORIES_INSERT,
    POST_COUNT,
    POST_DELETE,
    POST_GET_BY_ID,
    POST_INSERT,
    POST_LIST,
    POST_UPDATE,
    build_post_filters,
    build_post_paging,
)
from ..records import post_from_record


class AsyncPGPostRepository(PostRepository):
    """PostgreSQL post storage; category links live in ``post_categories``."""

    def __init__(self, database: DatabaseManager):
        self._db = database

    async def save(self, post: Post) -> Post:
        row_id = post.id.value
        async with self._db.transaction() as conn:
            if post.is_new:
                row_id = await conn.fetchval(
                    POST_INSERT,
                    post.title.value,
                    post.content.value,
                    post.published,
                    post.author_id.value,
                    post.created_at,
                    post.updated_at,
                )
            else:
                await conn.execute(
                    POST_UPDATE,
                    row_id,
                    post.title.value,
                    post.content.value,
                    post.published,
                    post.updated_at,
                )
                await conn.execute(POST_CATEGORIES_CLEAR, row_id)

            if post.category_ids:
                await conn.executemany(
                    POST_CATEGORIES_INSERT,
                    [
                        (row_id, category_id.value, position)
                        for position, category_id in enumerate(post.category_ids)
                    ],
                )
        # Only adopt the id once the transaction has committed.
        if post.is_new:
            post.assign_id(Identifier(row_id))
        return post

    async def find_by_id(self, post_id: Identifier) -> Optional[Post]:
        row = await self._db.fetchrow(POST_GET_BY_ID, post_id.value)
        return post_from_record(row) if row else None

    async def find(self, query: FindPostQuery) -> List[Post]:
        where, params = build_post_filters(query)
        paging = build_post_paging(query, params)
        rows = await self._db.fetch(POST_LIST.format(where=where, paging=paging), *params)
        return [post_from_record(row) for row in rows]

    async def count(self, query: FindPostQuery) -> int:
        where, params = build_post_filters(query)
        return await self._db.fetchval(POST_COUNT.format(where=where), *params)

    async def delete(self, post_id: Identifier) -> bool:
        status = await self._db.execute(POST_DELETE, post_id.value)
        return rows_affected(status) == 1

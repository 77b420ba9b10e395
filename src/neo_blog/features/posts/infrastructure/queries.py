"""
Post SQL queries and filter building.
"""

from typing import Any, List, Tuple

from ..core.protocols import FindPostQuery

POST_COLUMNS = """
    p.id, p.title, p.content, p.published, p.author_id, p.created_at, p.updated_at,
    ARRAY(
        SELECT pc.category_id FROM post_categories pc
        WHERE pc.post_id = p.id ORDER BY pc.position
    ) AS category_ids
"""

POST_INSERT = """
    INSERT INTO posts (title, content, published, author_id, created_at, updated_at)
    VALUES ($1, $2, $3, $4, $5, $6)
    RETURNING id
"""

POST_UPDATE = """
    UPDATE posts
    SET title = $2, content = $3, published = $4, updated_at = $5
    WHERE id = $1
"""

POST_CATEGORIES_CLEAR = "DELETE FROM post_categories WHERE post_id = $1"

POST_CATEGORIES_INSERT = """
    INSERT INTO post_categories (post_id, category_id, position)
    VALUES ($1, $2, $3)
"""

POST_GET_BY_ID = f"SELECT {POST_COLUMNS} FROM posts p WHERE p.id = $1"

POST_LIST = "SELECT " + POST_COLUMNS + " FROM posts p {where} ORDER BY p.created_at DESC, p.id DESC {paging}"

POST_COUNT = "SELECT COUNT(*) FROM posts p {where}"

POST_DELETE = "DELETE FROM posts WHERE id = $1"


def build_post_filters(query: FindPostQuery) -> Tuple[str, List[Any]]:
    """Translate a FindPostQuery into a WHERE clause and its parameters."""
    conditions: List[str] = []
    params: List[Any] = []

    if query.published is not None:
        params.append(query.published)
        conditions.append(f"p.published = ${len(params)}")

    if query.author_id is not None:
        params.append(query.author_id.value)
        conditions.append(f"p.author_id = ${len(params)}")

    if query.category_id is not None:
        params.append(query.category_id.value)
        conditions.append(
            "EXISTS (SELECT 1 FROM post_categories pc "
            f"WHERE pc.post_id = p.id AND pc.category_id = ${len(params)})"
        )

    where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
    return where, params


def build_post_paging(query: FindPostQuery, params: List[Any]) -> str:
    """Append LIMIT/OFFSET parameters for the set paging fields."""
    clauses = []
    if query.take is not None:
        params.append(query.take)
        clauses.append(f"LIMIT ${len(params)}")
    if query.skip:
        params.append(query.skip)
        clauses.append(f"OFFSET ${len(params)}")
    return " ".join(clauses)

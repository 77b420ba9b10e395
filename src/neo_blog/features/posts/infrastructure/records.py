"""Row codec shared by the post repositories."""

from typing import Any, Dict, Mapping

from ....core.value_objects import Identifier
from ..core.entities import Post
from ..core.value_objects import PostContent, PostTitle


def post_to_record(post: Post) -> Dict[str, Any]:
    return {
        "id": post.id.value,
        "title": post.title.value,
        "content": post.content.value,
        "published": post.published,
        "author_id": post.author_id.value,
        "category_ids": [category_id.value for category_id in post.category_ids],
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def post_from_record(row: Mapping[str, Any]) -> Post:
    return Post.create(
        title=PostTitle(row["title"]),
        content=PostContent(row["content"]),
        author_id=Identifier(row["author_id"]),
        published=row["published"],
        category_ids=[Identifier(category_id) for category_id in row["category_ids"] or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        id=Identifier(row["id"]),
    )

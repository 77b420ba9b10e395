"""Post entity to DTO mapping."""

from typing import Iterable, List, Optional

from ..core.entities import Post
from .dtos import PostDto


class PostMapper:
    def to_dto(self, post: Optional[Post]) -> Optional[PostDto]:
        if post is None:
            return None
        return PostDto(
            id=post.id.value,
            title=post.title.value,
            content=post.content.value,
            published=post.published,
            author_id=post.author_id.value,
            category_ids=[category_id.value for category_id in post.category_ids],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def to_dtos(self, posts: Optional[Iterable[Post]]) -> List[PostDto]:
        if not posts:
            return []
        return [self.to_dto(post) for post in posts]

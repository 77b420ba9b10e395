"""Post queries."""

from .get_post_by_id import GetPostByIdQuery, GetPostByIdQueryHandler
from .get_posts import GetPostsQuery, GetPostsQueryHandler

__all__ = [
    "GetPostByIdQuery",
    "GetPostByIdQueryHandler",
    "GetPostsQuery",
    "GetPostsQueryHandler",
]

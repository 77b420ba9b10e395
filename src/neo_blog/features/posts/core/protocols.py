"""Post repository protocol and its filter shape."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import List, Optional

from ....core.value_objects import Identifier
from .entities import Post


@dataclass(frozen=True)
class FindPostQuery:
    """Filter shared by ``find`` and ``count``.

    ``None`` means "do not filter" (or "no paging" for skip/take).
    """

    published: Optional[bool] = None
    author_id: Optional[Identifier] = None
    category_id: Optional[Identifier] = None
    skip: Optional[int] = None
    take: Optional[int] = None

    def without_paging(self) -> "FindPostQuery":
        return replace(self, skip=None, take=None)


class PostRepository(ABC):
    """Persistence contract for posts."""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert or update a post together with its category links."""
        ...

    @abstractmethod
    async def find_by_id(self, post_id: Identifier) -> Optional[Post]:
        ...

    @abstractmethod
    async def find(self, query: FindPostQuery) -> List[Post]:
        """Posts matching the filter, newest first, paged by skip/take."""
        ...

    @abstractmethod
    async def count(self, query: FindPostQuery) -> int:
        """Number of posts matching the filter; paging fields are ignored."""
        ...

    @abstractmethod
    async def delete(self, post_id: Identifier) -> bool:
        ...

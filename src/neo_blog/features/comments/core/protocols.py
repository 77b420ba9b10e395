"""Comment and reply repository protocols."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....core.value_objects import Identifier
from .entities import Comment, CommentResponse


class CommentRepository(ABC):
    """Persistence contract for comments.

    Reads return comments with their replies loaded; ``save`` only writes
    the comment itself.
    """

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        ...

    @abstractmethod
    async def find_by_id(self, comment_id: Identifier) -> Optional[Comment]:
        ...

    @abstractmethod
    async def find_by_post_id(self, post_id: Identifier) -> List[Comment]:
        """Comments on a post, oldest first."""
        ...

    @abstractmethod
    async def delete(self, comment_id: Identifier) -> bool:
        """Delete the comment and its replies."""
        ...


class CommentResponseRepository(ABC):
    """Persistence contract for replies."""

    @abstractmethod
    async def save(self, response: CommentResponse) -> CommentResponse:
        ...

    @abstractmethod
    async def find_by_id(self, response_id: Identifier) -> Optional[CommentResponse]:
        ...

    @abstractmethod
    async def find_by_comment_id(self, comment_id: Identifier) -> List[CommentResponse]:
        ...

    @abstractmethod
    async def delete(self, response_id: Identifier) -> bool:
        ...

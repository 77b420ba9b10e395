"""In-memory UserRepository for tests and local development."""

from itertools import count
from typing import Any, Dict, List, Optional

from .....core.value_objects import Identifier
from ...core.entities import User
from ...core.protocols import UserRepository
from ...core.value_objects import Email
from ..records import user_from_record, user_to_record


class InMemoryUserRepository(UserRepository):
    """User store; deletes cascade into the post and comment stores when attached."""

    def __init__(self, post_repository=None, comment_repository=None):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._ids = count(1)
        self.posts = post_repository
        self.comments = comment_repository

    async def save(self, user: User) -> User:
        if user.is_new:
            user.assign_id(Identifier(next(self._ids)))
        self._rows[user.id.value] = user_to_record(user)
        return user

    async def find_by_id(self, user_id: Identifier) -> Optional[User]:
        row = self._rows.get(user_id.value)
        return user_from_record(row) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        for row in self._rows.values():
            if row["email"] == email.value:
                return user_from_record(row)
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        for row in self._rows.values():
            if row["username"].lower() == wanted:
                return user_from_record(row)
        return None

    async def find_all(self) -> List[User]:
        return [user_from_record(self._rows[user_id]) for user_id in sorted(self._rows)]

    async def delete(self, user_id: Identifier) -> bool:
        if self._rows.pop(user_id.value, None) is None:
            return False
        if self.posts is not None:
            self.posts.remove_for_author(user_id)
        if self.comments is not None:
            self.comments.remove_for_author(user_id)
        return True

"""User repository protocol."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....core.value_objects import Identifier
from .entities import User
from .value_objects import Email


class UserRepository(ABC):
    """Persistence contract for users."""

    @abstractmethod
    async def save(self, user: User) -> User:
        ...

    @abstractmethod
    async def find_by_id(self, user_id: Identifier) -> Optional[User]:
        ...

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        ...

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive username lookup."""
        ...

    @abstractmethod
    async def find_all(self) -> List[User]:
        ...

    @abstractmethod
    async def delete(self, user_id: Identifier) -> bool:
        ...

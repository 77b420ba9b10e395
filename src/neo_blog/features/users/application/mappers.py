"""User entity to DTO mapping."""

from typing import Iterable, List, Optional

from ..core.entities import User
from .dtos import UserDto


class UserMapper:
    """Projects users without their password hash."""

    def to_dto(self, user: Optional[User]) -> Optional[UserDto]:
        if user is None:
            return None
        return UserDto(
            id=user.id.value,
            email=user.email.value,
            username=user.username,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_dtos(self, users: Optional[Iterable[User]]) -> List[UserDto]:
        if not users:
            return []
        return [self.to_dto(user) for user in users]

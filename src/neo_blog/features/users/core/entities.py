"""User aggregate."""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from ....core.entities import BaseEntity
from ....core.events import utc_now
from ....core.exceptions import (
    ArgumentInvalidError,
    ArgumentNotProvidedError,
    ArgumentOutOfRangeError,
)
from ....core.value_objects import Identifier
from .events import UserCreatedEvent, UserUpdatedEvent
from .value_objects import Email

USERNAME_MAX_LENGTH = 50
# Renames are held to a tighter window than stored usernames.
NEW_USERNAME_MIN_LENGTH = 3
NEW_USERNAME_MAX_LENGTH = 20


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


def _coerce_role(role: Union[UserRole, str, None]) -> UserRole:
    try:
        return UserRole(role)
    except ValueError:
        raise ArgumentInvalidError("Invalid user role") from None


class User(BaseEntity):
    """A registered account. ``password`` is always a hash, never plain text."""

    def __init__(
        self,
        email: Email,
        username: str,
        password: str,
        role: UserRole,
        created_at: datetime,
        updated_at: datetime,
        id: Optional[Identifier] = None,
    ):
        super().__init__(id)
        self._email = email
        self._username = username
        self._password = password
        self._role = role
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        email: Email,
        username: str,
        password: str,
        role: Union[UserRole, str] = UserRole.USER,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[Identifier] = None,
    ) -> "User":
        """Validate and build a user; new users stage UserCreatedEvent."""
        if email is None:
            raise ArgumentNotProvidedError("User email is required")
        if not username or not username.strip():
            raise ArgumentNotProvidedError("Username is required")
        if not password:
            raise ArgumentNotProvidedError("Password hash is required")
        role = _coerce_role(role)
        username = username.strip()
        if len(username) > USERNAME_MAX_LENGTH:
            raise ArgumentOutOfRangeError("Username too long")

        now = utc_now()
        user = cls(
            email=email,
            username=username,
            password=password,
            role=role,
            created_at=created_at or now,
            updated_at=updated_at or created_at or now,
            id=id,
        )
        if user.is_new:
            user.add_domain_event(
                UserCreatedEvent(aggregate_id=user.id, email=email.value, username=username)
            )
        return user

    @property
    def email(self) -> Email:
        return self._email

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role is UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_username(self, new_username: str) -> bool:
        if not new_username or not new_username.strip():
            raise ArgumentNotProvidedError("New username is required")
        new_username = new_username.strip()
        if not NEW_USERNAME_MIN_LENGTH <= len(new_username) <= NEW_USERNAME_MAX_LENGTH:
            raise ArgumentOutOfRangeError(
                f"Username must be between {NEW_USERNAME_MIN_LENGTH} "
                f"and {NEW_USERNAME_MAX_LENGTH} characters."
            )
        if new_username == self._username:
            return False
        self._username = new_username
        self._updated("username")
        return True

    def update_email(self, new_email: Email) -> bool:
        if new_email is None:
            raise ArgumentNotProvidedError("New email is required")
        if new_email == self._email:
            return False
        self._email = new_email
        self._updated("email")
        return True

    def change_role(self, new_role: Union[UserRole, str]) -> bool:
        new_role = _coerce_role(new_role)
        if new_role is self._role:
            return False
        self._role = new_role
        self._updated("role")
        return True

    def change_password(self, new_password_hash: str) -> bool:
        if not new_password_hash:
            raise ArgumentNotProvidedError("New password is required")
        if new_password_hash == self._password:
            return False
        self._password = new_password_hash
        self._updated("password")
        return True

    def promote_to_admin(self) -> None:
        """Grant ADMIN without staging an event."""
        if self._role is not UserRole.ADMIN:
            self._role = UserRole.ADMIN
            self._touch()

    def demote_to_user(self) -> None:
        """Revoke ADMIN without staging an event."""
        if self._role is not UserRole.USER:
            self._role = UserRole.USER
            self._touch()

    def _updated(self, field_name: str) -> None:
        self._touch()
        self.add_domain_event(UserUpdatedEvent(aggregate_id=self.id, updated_fields=(field_name,)))

    def _touch(self) -> None:
        self._updated_at = utc_now()

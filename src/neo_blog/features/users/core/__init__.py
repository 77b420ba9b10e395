"""User domain model."""

from .value_objects import Email
from .entities import User, UserRole
from .events import UserCreatedEvent, UserUpdatedEvent, UserDeletedEvent
from .exceptions import UserNotFoundError, EmailAlreadyExistsError, UsernameAlreadyExistsError
from .protocols import UserRepository

__all__ = [
    "Email",
    "User",
    "UserRole",
    "UserCreatedEvent",
    "UserUpdatedEvent",
    "UserDeletedEvent",
    "UserNotFoundError",
    "EmailAlreadyExistsError",
    "UsernameAlreadyExistsError",
    "UserRepository",
]

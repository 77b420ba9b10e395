"""User commands."""

from .create_user import CreateUserCommand, CreateUserCommandHandler
from .update_user import UpdateUserCommand, UpdateUserCommandHandler
from .delete_user import DeleteUserCommand, DeleteUserCommandHandler

__all__ = [
    "CreateUserCommand",
    "CreateUserCommandHandler",
    "UpdateUserCommand",
    "UpdateUserCommandHandler",
    "DeleteUserCommand",
    "DeleteUserCommandHandler",
]

"""User queries."""

from .get_user_by_id import GetUserByIdQuery, GetUserByIdQueryHandler
from .get_user_by_email import GetUserByEmailQuery, GetUserByEmailQueryHandler
from .get_all_users import GetAllUsersQuery, GetAllUsersQueryHandler

__all__ = [
    "GetUserByIdQuery",
    "GetUserByIdQueryHandler",
    "GetUserByEmailQuery",
    "GetUserByEmailQueryHandler",
    "GetAllUsersQuery",
    "GetAllUsersQueryHandler",
]

"""Row codec shared by the user repositories."""

from typing import Any, Dict, Mapping

from ....core.value_objects import Identifier
from ..core.entities import User, UserRole
from ..core.value_objects import Email


def user_to_record(user: User) -> Dict[str, Any]:
    return {
        "id": user.id.value,
        "email": user.email.value,
        "username": user.username,
        "password": user.password,
        "role": user.role.value,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def user_from_record(row: Mapping[str, Any]) -> User:
    return User.create(
        email=Email(row["email"]),
        username=row["username"],
        password=row["password"],
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        id=Identifier(row["id"]),
    )

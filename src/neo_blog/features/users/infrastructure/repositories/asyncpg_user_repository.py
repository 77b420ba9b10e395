"""AsyncPG implementation of UserRepository."""

from typing import List, Optional

import asyncpg

from .....core.value_objects import Identifier
from .....infrastructure.database import DatabaseManager, rows_affected
from ...core.entities import User
from ...core.exceptions import EmailAlreadyExistsError, UsernameAlreadyExistsError
from ...core.protocols import UserRepository
from ...core.value_objects import Email
from ..queries import (
    USER_DELETE,
    USER_GET_BY_EMAIL,
    USER_GET_BY_ID,
    USER_GET_BY_USERNAME,
    USER_INSERT,
    USER_LIST,
    USER_UPDATE,
)
from ..records import user_from_record


def _conflict_for(error: asyncpg.UniqueViolationError, user: User) -> Exception:
    # users_email_key / users_username_key are the default constraint names
    if "email" in (error.constraint_name or ""):
        return EmailAlreadyExistsError(user.email.value)
    return UsernameAlreadyExistsError(user.username)


class AsyncPGUserRepository(UserRepository):
    """PostgreSQL user storage.

    Uniqueness is checked by the command handlers first; a concurrent insert
    that still hits a unique index surfaces as the matching conflict error.
    """

    def __init__(self, database: DatabaseManager):
        self._db = database

    async def save(self, user: User) -> User:
        try:
            if user.is_new:
                row = await self._db.fetchrow(
                    USER_INSERT,
                    user.email.value,
                    user.username,
                    user.password,
                    user.role.value,
                    user.created_at,
                    user.updated_at,
                )
                user.assign_id(Identifier(row["id"]))
            else:
                await self._db.execute(
                    USER_UPDATE,
                    user.id.value,
                    user.email.value,
                    user.username,
                    user.password,
                    user.role.value,
                    user.updated_at,
                )
        except asyncpg.UniqueViolationError as e:
            raise _conflict_for(e, user) from e
        return user

    async def find_by_id(self, user_id: Identifier) -> Optional[User]:
        row = await self._db.fetchrow(USER_GET_BY_ID, user_id.value)
        return user_from_record(row) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        row = await self._db.fetchrow(USER_GET_BY_EMAIL, email.value)
        return user_from_record(row) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        row = await self._db.fetchrow(USER_GET_BY_USERNAME, username)
        return user_from_record(row) if row else None

    async def find_all(self) -> List[User]:
        return [user_from_record(row) for row in await self._db.fetch(USER_LIST)]

    async def delete(self, user_id: Identifier) -> bool:
        status = await self._db.execute(USER_DELETE, user_id.value)
        return rows_affected(status) == 1

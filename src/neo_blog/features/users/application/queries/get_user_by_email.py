"""Get user by e-mail query."""

from dataclasses import dataclass
from typing import Optional

from ...core.protocols import UserRepository
from ...core.value_objects import Email
from ..dtos import UserDto
from ..mappers import UserMapper


@dataclass
class GetUserByEmailQuery:
    """Lookup by address; matching ignores case and surrounding spaces."""
    email: str


class GetUserByEmailQueryHandler:
    def __init__(self, repository: UserRepository, mapper: Optional[UserMapper] = None):
        self.repository = repository
        self.mapper = mapper or UserMapper()

    async def execute(self, query: GetUserByEmailQuery) -> Optional[UserDto]:
        user = await self.repository.find_by_email(Email.create(query.email))
        return self.mapper.to_dto(user)

"""List users query."""

from dataclasses import dataclass
from typing import List, Optional

from ...core.protocols import UserRepository
from ..dtos import UserDto
from ..mappers import UserMapper


@dataclass
class GetAllUsersQuery:
    pass


class GetAllUsersQueryHandler:
    def __init__(self, repository: UserRepository, mapper: Optional[UserMapper] = None):
        self.repository = repository
        self.mapper = mapper or UserMapper()

    async def execute(self, query: GetAllUsersQuery) -> List[UserDto]:
        return self.mapper.to_dtos(await self.repository.find_all())

"""Get user by ID query."""

from dataclasses import dataclass
from typing import Optional

from .....core.value_objects import Identifier
from ...core.protocols import UserRepository
from ..dtos import UserDto
from ..mappers import UserMapper


@dataclass
class GetUserByIdQuery:
    user_id: int


class GetUserByIdQueryHandler:
    def __init__(self, repository: UserRepository, mapper: Optional[UserMapper] = None):
        self.repository = repository
        self.mapper = mapper or UserMapper()

    async def execute(self, query: GetUserByIdQuery) -> Optional[UserDto]:
        user = await self.repository.find_by_id(Identifier.create(query.user_id))
        return self.mapper.to_dto(user)

"""Update user command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher, PasswordHasher
from .....core.value_objects import Identifier
from ...core.exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    UsernameAlreadyExistsError,
)
from ...core.protocols import UserRepository
from ...core.value_objects import Email
from ..dtos import UserDto
from ..mappers import UserMapper
from ..queries.get_user_by_id import GetUserByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class UpdateUserCommand:
    """Partial user update; ``None`` leaves a field untouched."""
    user_id: int
    email: Optional[str] = None
    username: Optional[str] = None
    role: Optional[str] = None
    password: Optional[str] = None


class UpdateUserCommandHandler:
    """Handler for UpdateUserCommand.

    E-mail and username stay unique across users; keeping one's own value
    is not a conflict.
    """

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
        mapper: Optional[UserMapper] = None,
    ):
        self.repository = repository
        self.password_hasher = password_hasher
        self.event_publisher = event_publisher
        self.query_bus = query_bus
        self.mapper = mapper or UserMapper()

    async def execute(self, command: UpdateUserCommand) -> UserDto:
        user_id = Identifier.create(command.user_id)
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"ID: {user_id.value}")

        changed = False

        if command.email is not None:
            email = Email.create(command.email)
            if email != user.email:
                holder = await self.repository.find_by_email(email)
                if holder is not None and holder.id != user.id:
                    raise EmailAlreadyExistsError(email.value)
                changed |= user.update_email(email)

        if command.username is not None:
            username = command.username.strip()
            if username != user.username:
                holder = await self.repository.find_by_username(username)
                if holder is not None and holder.id != user.id:
                    raise UsernameAlreadyExistsError(username)
                changed |= user.update_username(username)

        if command.role is not None:
            changed |= user.change_role(command.role)

        if command.password is not None:
            if not await self.password_hasher.compare(command.password, user.password):
                changed |= user.change_password(await self.password_hasher.hash(command.password))

        if not changed:
            user.clear_events()
            return self.mapper.to_dto(user)

        await save_and_publish(self.repository, user, self.event_publisher)
        logger.info(f"Updated user {user_id.value}")

        dto = await self.query_bus.execute(GetUserByIdQuery(user_id.value))
        return require_read_model(dto, "user", user_id.value)

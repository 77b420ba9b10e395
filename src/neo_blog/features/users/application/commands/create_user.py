"""Create user command."""

import asyncio
import logging
from dataclasses import dataclass

from .....application import QueryBus, require_read_model, save_and_publish
from .....core.protocols import EventPublisher, PasswordHasher
from ...core.entities import User, UserRole
from ...core.exceptions import EmailAlreadyExistsError, UsernameAlreadyExistsError
from ...core.protocols import UserRepository
from ...core.value_objects import Email
from ..dtos import UserDto
from ..queries.get_user_by_id import GetUserByIdQuery

logger = logging.getLogger(__name__)


@dataclass
class CreateUserCommand:
    """Command to register a user from a plain-text password."""
    email: str
    username: str
    password: str
    role: str = UserRole.USER.value


class CreateUserCommandHandler:
    """Handler for CreateUserCommand."""

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        event_publisher: EventPublisher,
        query_bus: QueryBus,
    ):
        self.repository = repository
        self.password_hasher = password_hasher
        self.event_publisher = event_publisher
        self.query_bus = query_bus

    async def execute(self, command: CreateUserCommand) -> UserDto:
        """
        Execute the create user command.

        Raises:
            EmailAlreadyExistsError: If the e-mail is registered
            UsernameAlreadyExistsError: If the username is taken
            DomainValidationError: If any field is invalid
            PostConditionError: If the new user cannot be read back
        """
        email = Email.create(command.email)
        username = (command.username or "").strip()

        by_email, by_username = await asyncio.gather(
            self.repository.find_by_email(email),
            self.repository.find_by_username(username),
        )
        if by_email is not None:
            raise EmailAlreadyExistsError(email.value)
        if username and by_username is not None:
            raise UsernameAlreadyExistsError(username)

        password_hash = await self.password_hasher.hash(command.password)
        user = User.create(
            email=email,
            username=username,
            password=password_hash,
            role=command.role,
        )
        saved = await save_and_publish(self.repository, user, self.event_publisher)
        logger.info(f"Created user {saved.id.value} ({email.value})")

        dto = await self.query_bus.execute(GetUserByIdQuery(saved.id.value))
        return require_read_model(dto, "user", saved.id.value, created=True)

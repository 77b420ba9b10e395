"""Login and registration."""

import logging
from typing import Optional

from ....application import CommandBus
from ....core.exceptions import DomainValidationError, InvalidCredentialsError
from ....core.protocols import PasswordHasher
from ...users.application.commands import CreateUserCommand
from ...users.application.dtos import UserDto
from ...users.application.mappers import UserMapper
from ...users.core.entities import UserRole
from ...users.core.protocols import UserRepository
from ...users.core.value_objects import Email
from .dtos import AuthPayload
from .token_service import JwtTokenService

logger = logging.getLogger(__name__)

DUMMY_PASSWORD = "neo-blog-unknown-user"


class AuthService:
    """Credential checks and token issuing on top of the user feature."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: JwtTokenService,
        command_bus: CommandBus,
        mapper: Optional[UserMapper] = None,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.command_bus = command_bus
        self.mapper = mapper or UserMapper()
        self._dummy_hash: Optional[str] = None

    async def validate_user_credentials(self, email: str, password: str) -> Optional[UserDto]:
        """Return the user when email and password match, else None."""
        if not email or not password:
            return None
        try:
            normalized = Email.create(email)
        except DomainValidationError:
            return None

        user = await self.user_repository.find_by_email(normalized)
        if user is None:
            # unknown emails still run one hash comparison
            await self.password_hasher.compare(password, await self._dummy_password_hash())
            return None
        if not await self.password_hasher.compare(password, user.password):
            return None
        return self.mapper.to_dto(user)

    async def _dummy_password_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await self.password_hasher.hash(DUMMY_PASSWORD)
        return self._dummy_hash

    async def login(self, email: str, password: str) -> AuthPayload:
        """
        Exchange credentials for an access token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.validate_user_credentials(email, password)
        if user is None:
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentialsError("Invalid email or password.")
        logger.info(f"User {user.id} logged in")
        return self.issue_token(user)

    async def register(self, email: str, username: str, password: str) -> AuthPayload:
        """Create a USER account and log it in. Conflicts propagate."""
        user = await self.command_bus.execute(
            CreateUserCommand(
                email=email,
                username=username,
                password=password,
                role=UserRole.USER.value,
            )
        )
        logger.info(f"Registered user {user.id}")
        return self.issue_token(user)

    def issue_token(self, user: UserDto) -> AuthPayload:
        return AuthPayload(
            access_token=self.token_service.create_access_token(user),
            expires_in=self.token_service.expires_in,
            user=user,
        )

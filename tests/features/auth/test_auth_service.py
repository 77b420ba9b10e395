"""Tests for AuthService."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from neo_blog.application import CommandBus
from neo_blog.core.exceptions import InvalidCredentialsError
from neo_blog.core.value_objects import Identifier
from neo_blog.features.auth.application import AuthService, JwtTokenService
from neo_blog.features.users.application.commands import CreateUserCommand
from neo_blog.features.users.application.mappers import UserMapper
from neo_blog.features.users.core import Email, User


@pytest.fixture
def token_service():
    return JwtTokenService(secret="test-secret-key", expires_in=600)


@pytest_asyncio.fixture
async def stored_user(password_hasher):
    return User.create(
        email=Email.create("jane@example.com"),
        username="jane",
        password=await password_hasher.hash("correct horse"),
        id=Identifier(1),
    )


@pytest.fixture
def mock_command_bus():
    return AsyncMock(spec=CommandBus)


@pytest.fixture
def service(mock_user_repository, password_hasher, token_service, mock_command_bus):
    return AuthService(mock_user_repository, password_hasher, token_service, mock_command_bus)


class TestValidateUserCredentials:
    @pytest.mark.asyncio
    async def test_valid(self, service, mock_user_repository, stored_user):
        mock_user_repository.find_by_email.return_value = stored_user

        user = await service.validate_user_credentials(" JANE@example.com ", "correct horse")

        assert user.id == 1
        assert mock_user_repository.find_by_email.call_args.args[0] == Email.create("jane@example.com")

    @pytest.mark.asyncio
    async def test_wrong_password(self, service, mock_user_repository, stored_user):
        mock_user_repository.find_by_email.return_value = stored_user

        assert await service.validate_user_credentials("jane@example.com", "wrong") is None

    @pytest.mark.asyncio
    async def test_unknown_email(self, service, mock_user_repository, password_hasher, mocker):
        """An unknown address still costs one hash comparison."""
        mock_user_repository.find_by_email.return_value = None
        compare = mocker.spy(password_hasher, "compare")

        assert await service.validate_user_credentials("nobody@example.com", "x") is None
        assert await service.validate_user_credentials("other@example.com", "y") is None

        assert compare.call_count == 2
        dummy = compare.call_args_list[0].args[1]
        assert dummy.startswith("$2b$04$")
        assert compare.call_args_list[1].args[1] == dummy

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [("not-an-email", "x"), ("", "x"), ("a@b.io", "")])
    async def test_malformed_input(self, service, mock_user_repository, email, password):
        assert await service.validate_user_credentials(email, password) is None
        mock_user_repository.find_by_email.assert_not_called()


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_issues_token(self, service, mock_user_repository, stored_user, token_service):
        mock_user_repository.find_by_email.return_value = stored_user

        payload = await service.login("jane@example.com", "correct horse")

        assert payload.token_type == "bearer"
        assert payload.expires_in == 600
        claims = token_service.decode(payload.access_token)
        assert (claims.user_id, claims.email, claims.role) == (1, "jane@example.com", "USER")

    @pytest.mark.asyncio
    async def test_login_failure(self, service, mock_user_repository):
        mock_user_repository.find_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await service.login("jane@example.com", "nope")

        assert str(exc_info.value) == "Invalid email or password."


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_always_creates_user_role(self, service, mock_command_bus, stored_user):
        mock_command_bus.execute.return_value = UserMapper().to_dto(stored_user)

        payload = await service.register("jane@example.com", "jane", "correct horse")

        mock_command_bus.execute.assert_awaited_once_with(
            CreateUserCommand(
                email="jane@example.com", username="jane", password="correct horse", role="USER"
            )
        )
        assert payload.user.username == "jane"
        assert payload.access_token

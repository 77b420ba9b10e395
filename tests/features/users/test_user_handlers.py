"""Tests for the user command and query handlers."""

from unittest.mock import AsyncMock

import pytest

from neo_blog.application import DeleteResultDto
from neo_blog.core.exceptions import DomainValidationError, PostConditionError
from neo_blog.core.protocols import PasswordHasher
from neo_blog.features.users.application.commands import (
    CreateUserCommand,
    CreateUserCommandHandler,
    DeleteUserCommand,
    DeleteUserCommandHandler,
    UpdateUserCommand,
    UpdateUserCommandHandler,
)
from neo_blog.features.users.application.handlers import LogUserCreatedHandler
from neo_blog.features.users.application.mappers import UserMapper
from neo_blog.features.users.application.queries import (
    GetAllUsersQuery,
    GetAllUsersQueryHandler,
    GetUserByEmailQuery,
    GetUserByEmailQueryHandler,
    GetUserByIdQuery,
)
from neo_blog.features.users.core import (
    EmailAlreadyExistsError,
    UserCreatedEvent,
    UserDeletedEvent,
    UserNotFoundError,
    UsernameAlreadyExistsError,
)


@pytest.fixture
def hasher():
    hasher = AsyncMock(spec=PasswordHasher)
    hasher.hash.side_effect = lambda plain: f"hashed:{plain}"
    hasher.compare.side_effect = lambda plain, hashed: hashed == f"hashed:{plain}"
    return hasher


class TestCreateUser:
    @pytest.fixture
    def handler(self, mock_user_repository, hasher, mock_event_publisher, mock_query_bus):
        return CreateUserCommandHandler(mock_user_repository, hasher, mock_event_publisher, mock_query_bus)

    @pytest.mark.asyncio
    async def test_create_user(
        self, handler, mock_user_repository, mock_event_publisher, mock_query_bus, hasher
    ):
        mock_user_repository.find_by_email.return_value = None
        mock_user_repository.find_by_username.return_value = None
        mock_query_bus.execute.return_value = "user-dto"

        result = await handler.execute(
            CreateUserCommand(email="New@Example.com", username="newbie", password="secret")
        )

        assert result == "user-dto"
        saved = mock_user_repository.save.call_args.args[0]
        assert saved.password == "hashed:secret"
        assert saved.email.value == "new@example.com"
        event = mock_event_publisher.publish_all.call_args.args[0][0]
        assert isinstance(event, UserCreatedEvent)
        assert event.aggregate_id.value == 1
        mock_query_bus.execute.assert_awaited_once_with(GetUserByIdQuery(1))

    @pytest.mark.asyncio
    async def test_duplicate_email(self, handler, mock_user_repository, sample_user, hasher):
        mock_user_repository.find_by_email.return_value = sample_user
        mock_user_repository.find_by_username.return_value = None

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await handler.execute(
                CreateUserCommand(email="jane@example.com", username="other", password="x")
            )

        assert str(exc_info.value) == 'User with email "jane@example.com" already exists.'
        hasher.hash.assert_not_called()
        mock_user_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_username(self, handler, mock_user_repository, sample_user):
        mock_user_repository.find_by_email.return_value = None
        mock_user_repository.find_by_username.return_value = sample_user

        with pytest.raises(UsernameAlreadyExistsError):
            await handler.execute(CreateUserCommand(email="x@example.com", username="jane", password="x"))

    @pytest.mark.asyncio
    async def test_invalid_email(self, handler, mock_user_repository):
        with pytest.raises(DomainValidationError):
            await handler.execute(CreateUserCommand(email="nope", username="x", password="x"))
        mock_user_repository.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_read_model(self, handler, mock_user_repository, mock_query_bus):
        mock_user_repository.find_by_email.return_value = None
        mock_user_repository.find_by_username.return_value = None
        mock_query_bus.execute.return_value = None

        with pytest.raises(PostConditionError) as exc_info:
            await handler.execute(CreateUserCommand(email="x@example.com", username="x", password="x"))

        assert str(exc_info.value) == "Failed to fetch newly created user with ID: 1."


class TestUpdateUser:
    @pytest.fixture
    def handler(self, mock_user_repository, hasher, mock_event_publisher, mock_query_bus):
        return UpdateUserCommandHandler(mock_user_repository, hasher, mock_event_publisher, mock_query_bus)

    @pytest.mark.asyncio
    async def test_same_values_are_a_noop(
        self, handler, mock_user_repository, mock_event_publisher, mock_query_bus, sample_user
    ):
        mock_user_repository.find_by_id.return_value = sample_user

        result = await handler.execute(
            UpdateUserCommand(user_id=1, email="JANE@example.com", username="jane", role="USER")
        )

        assert result == UserMapper().to_dto(sample_user)
        mock_user_repository.save.assert_not_called()
        mock_event_publisher.publish_all.assert_not_called()
        mock_query_bus.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user(
        self, handler, mock_user_repository, sample_user, sample_admin
    ):
        mock_user_repository.find_by_id.return_value = sample_user
        mock_user_repository.find_by_email.return_value = sample_admin

        with pytest.raises(EmailAlreadyExistsError):
            await handler.execute(UpdateUserCommand(user_id=1, email="admin@example.com"))
        mock_user_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_username_taken_by_other_user(
        self, handler, mock_user_repository, sample_user, sample_admin
    ):
        mock_user_repository.find_by_id.return_value = sample_user
        mock_user_repository.find_by_username.return_value = sample_admin

        with pytest.raises(UsernameAlreadyExistsError):
            await handler.execute(UpdateUserCommand(user_id=1, username="admin"))

    @pytest.mark.asyncio
    async def test_changes_role_and_password(
        self, handler, mock_user_repository, mock_event_publisher, mock_query_bus, sample_user
    ):
        mock_user_repository.find_by_id.return_value = sample_user
        mock_query_bus.execute.return_value = "dto"

        await handler.execute(UpdateUserCommand(user_id=1, role="ADMIN", password="new-secret"))

        saved = mock_user_repository.save.call_args.args[0]
        assert saved.is_admin
        assert saved.password == "hashed:new-secret"
        fields = [e.updated_fields for e in mock_event_publisher.publish_all.call_args.args[0]]
        assert fields == [("role",), ("password",)]

    @pytest.mark.asyncio
    async def test_unknown_user(self, handler, mock_user_repository):
        mock_user_repository.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await handler.execute(UpdateUserCommand(user_id=9, username="ghost"))


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete(self, mock_user_repository, mock_event_publisher, sample_user):
        mock_user_repository.find_by_id.return_value = sample_user
        mock_user_repository.delete.return_value = True
        handler = DeleteUserCommandHandler(mock_user_repository, mock_event_publisher)

        assert await handler.execute(DeleteUserCommand(user_id=1)) == DeleteResultDto(success=True)
        assert isinstance(mock_event_publisher.publish.call_args.args[0], UserDeletedEvent)

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_user_repository, mock_event_publisher):
        mock_user_repository.find_by_id.return_value = None
        handler = DeleteUserCommandHandler(mock_user_repository, mock_event_publisher)

        with pytest.raises(UserNotFoundError):
            await handler.execute(DeleteUserCommand(user_id=1))
        mock_user_repository.delete.assert_not_called()


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_get_by_email_hides_password(self, mock_user_repository, sample_user):
        mock_user_repository.find_by_email.return_value = sample_user

        dto = await GetUserByEmailQueryHandler(mock_user_repository).execute(
            GetUserByEmailQuery(" JANE@example.com")
        )

        assert dto.email == "jane@example.com"
        assert not hasattr(dto, "password")

    @pytest.mark.asyncio
    async def test_get_all(self, mock_user_repository, sample_user, sample_admin):
        mock_user_repository.find_all.return_value = [sample_user, sample_admin]

        dtos = await GetAllUsersQueryHandler(mock_user_repository).execute(GetAllUsersQuery())

        assert [(d.id, d.role) for d in dtos] == [(1, "USER"), (2, "ADMIN")]


class TestMappers:
    def test_none_and_empty(self):
        mapper = UserMapper()
        assert mapper.to_dto(None) is None
        assert mapper.to_dtos(None) == []
        assert mapper.to_dtos([]) == []


class TestLogUserCreatedHandler:
    @pytest.mark.asyncio
    async def test_logs(self, caplog, sample_user):
        event = UserCreatedEvent(aggregate_id=sample_user.id, email="jane@example.com", username="jane")

        with caplog.at_level("INFO"):
            await LogUserCreatedHandler().handle(event)

        assert "User created: ID 1 (jane, jane@example.com)" in caplog.text

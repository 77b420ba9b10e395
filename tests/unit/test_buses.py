"""Tests for the command and query buses and the write pipeline helpers."""

from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest

from neo_blog.application import (
    CommandBus,
    QueryBus,
    require_read_model,
    save_and_publish,
)
from neo_blog.core.exceptions import (
    ConfigurationError,
    HandlerNotFoundError,
    PostConditionError,
)
from neo_blog.core.value_objects import Identifier
from neo_blog.features.categories.core import Category, CategoryName


@dataclass
class PingCommand:
    value: int


class PingHandler:
    async def execute(self, command: PingCommand) -> int:
        return command.value * 2


class TestMessageBus:
    @pytest.mark.asyncio
    async def test_dispatches_to_registered_handler(self):
        bus = CommandBus()
        bus.register(PingCommand, PingHandler())

        assert bus.is_registered(PingCommand)
        assert await bus.execute(PingCommand(21)) == 42

    def test_double_registration_fails(self):
        bus = QueryBus()
        bus.register(PingCommand, PingHandler())
        with pytest.raises(ConfigurationError):
            bus.register(PingCommand, PingHandler())

    @pytest.mark.asyncio
    async def test_unknown_message(self):
        with pytest.raises(HandlerNotFoundError):
            await QueryBus().execute(PingCommand(1))


class TestSaveAndPublish:
    @pytest.mark.asyncio
    async def test_persists_before_publishing(self):
        calls = []
        repository = AsyncMock()
        publisher = AsyncMock()

        async def save(entity):
            calls.append("save")
            entity.assign_id(Identifier(3))
            return entity

        async def publish_all(events):
            calls.append("publish")

        repository.save.side_effect = save
        publisher.publish_all.side_effect = publish_all
        category = Category.create(CategoryName.create("Tech"))

        saved = await save_and_publish(repository, category, publisher)

        assert calls == ["save", "publish"]
        assert saved is category
        published = publisher.publish_all.call_args.args[0]
        assert published[0].aggregate_id == Identifier(3)

    @pytest.mark.asyncio
    async def test_copies_id_from_returned_instance(self):
        repository = AsyncMock()
        publisher = AsyncMock()
        stored = Category.create(CategoryName.create("Tech"), id=Identifier(8))
        repository.save.return_value = stored
        category = Category.create(CategoryName.create("Tech"))

        saved = await save_and_publish(repository, category, publisher)

        assert saved is stored
        assert category.id == Identifier(8)
        assert publisher.publish_all.call_args.args[0][0].aggregate_id == Identifier(8)

    @pytest.mark.asyncio
    async def test_failed_save_publishes_nothing(self):
        repository = AsyncMock()
        repository.save.side_effect = RuntimeError("db down")
        publisher = AsyncMock()

        with pytest.raises(RuntimeError):
            await save_and_publish(repository, Category.create(CategoryName.create("Tech")), publisher)

        publisher.publish_all.assert_not_called()


class TestRequireReadModel:
    def test_returns_dto(self):
        assert require_read_model({"id": 1}, "category", 1) == {"id": 1}

    def test_created_message(self):
        with pytest.raises(PostConditionError) as exc_info:
            require_read_model(None, "category", 4, created=True)
        assert str(exc_info.value) == "Failed to fetch newly created category with ID: 4."

    def test_updated_message(self):
        with pytest.raises(PostConditionError) as exc_info:
            require_read_model(None, "post", 4)
        assert str(exc_info.value) == "Failed to fetch updated post with ID: 4."

"""Tests for BaseEntity event staging and identity."""

from unittest.mock import AsyncMock

import pytest

from neo_blog.core.exceptions import InvalidStateError
from neo_blog.core.protocols import EventPublisher
from neo_blog.core.value_objects import Identifier
from neo_blog.features.categories.core import Category, CategoryCreatedEvent, CategoryName


def new_category(name="Tech"):
    return Category.create(CategoryName.create(name))


class TestEventStaging:
    def test_new_entity_stages_created_event(self):
        category = new_category()
        assert category.is_new
        assert [type(e) for e in category.domain_events] == [CategoryCreatedEvent]

    def test_reconstituted_entity_stages_nothing(self):
        category = Category.create(CategoryName.create("Tech"), id=Identifier(4))
        assert category.domain_events == ()

    def test_domain_events_is_a_copy(self):
        category = new_category()
        events = category.domain_events
        category.clear_events()
        assert len(events) == 1
        assert category.domain_events == ()

    def test_add_domain_event_logs(self, caplog):
        with caplog.at_level("DEBUG", logger="neo_blog.core.entities.base_entity"):
            new_category()
        assert "CategoryCreatedEvent added for Aggregate Category ID 0" in caplog.text

    @pytest.mark.asyncio
    async def test_publish_events_clears_after_success(self):
        publisher = AsyncMock(spec=EventPublisher)
        category = new_category()

        await category.publish_events(publisher)

        publisher.publish_all.assert_awaited_once()
        assert category.domain_events == ()

    @pytest.mark.asyncio
    async def test_failed_publish_keeps_events(self):
        publisher = AsyncMock(spec=EventPublisher)
        publisher.publish_all.side_effect = RuntimeError("bus down")
        category = new_category()

        with pytest.raises(RuntimeError):
            await category.publish_events(publisher)

        assert len(category.domain_events) == 1

    @pytest.mark.asyncio
    async def test_publish_without_events_is_noop(self):
        publisher = AsyncMock(spec=EventPublisher)
        category = Category.create(CategoryName.create("Tech"), id=Identifier(1))

        await category.publish_events(publisher)

        publisher.publish_all.assert_not_called()


class TestAssignId:
    def test_readdresses_pending_events(self):
        category = new_category()
        category.assign_id(Identifier(9))

        assert category.id == Identifier(9)
        assert not category.is_new
        assert category.domain_events[0].aggregate_id == Identifier(9)

    def test_persisted_entity_rejects_new_id(self):
        category = Category.create(CategoryName.create("Tech"), id=Identifier(1))
        with pytest.raises(InvalidStateError):
            category.assign_id(Identifier(2))


class TestEquality:
    def test_equal_by_id(self):
        a = Category.create(CategoryName.create("Tech"), id=Identifier(1))
        b = Category.create(CategoryName.create("News"), id=Identifier(1))
        assert a == b
        assert a.equals(b)
        assert hash(a) == hash(b)

    def test_unpersisted_entities_only_equal_themselves(self):
        a = new_category()
        b = new_category()
        assert a == a
        assert a != b

    def test_different_ids(self):
        a = Category.create(CategoryName.create("Tech"), id=Identifier(1))
        b = Category.create(CategoryName.create("Tech"), id=Identifier(2))
        assert a != b

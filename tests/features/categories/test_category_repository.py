"""Tests for the in-memory category repository."""

import pytest

from neo_blog.core.value_objects import Identifier
from neo_blog.features.categories.core import Category, CategoryName
from neo_blog.features.categories.infrastructure.repositories import InMemoryCategoryRepository


@pytest.fixture
def repository():
    return InMemoryCategoryRepository()


class TestInMemoryCategoryRepository:
    @pytest.mark.asyncio
    async def test_save_assigns_sequential_ids(self, repository):
        first = await repository.save(Category.create(CategoryName.create("Tech")))
        second = await repository.save(Category.create(CategoryName.create("News")))

        assert first.id == Identifier(1)
        assert second.id == Identifier(2)

    @pytest.mark.asyncio
    async def test_find_by_name_ignores_case(self, repository):
        await repository.save(Category.create(CategoryName.create("Tech")))

        found = await repository.find_by_name(CategoryName.create("TECH"))

        assert found is not None
        assert found.name.value == "Tech"
        assert found.domain_events == ()

    @pytest.mark.asyncio
    async def test_reads_are_detached(self, repository):
        saved = await repository.save(Category.create(CategoryName.create("Tech")))
        loaded = await repository.find_by_id(saved.id)
        loaded.update_name(CategoryName.create("Changed"))

        reloaded = await repository.find_by_id(saved.id)

        assert reloaded.name.value == "Tech"

    @pytest.mark.asyncio
    async def test_find_all_sorted_by_name(self, repository):
        for name in ("Travel", "Food", "Music"):
            await repository.save(Category.create(CategoryName.create(name)))

        names = [c.name.value for c in await repository.find_all()]

        assert names == ["Food", "Music", "Travel"]

    @pytest.mark.asyncio
    async def test_delete(self, repository):
        saved = await repository.save(Category.create(CategoryName.create("Tech")))

        assert await repository.delete(saved.id) is True
        assert await repository.delete(saved.id) is False
        assert await repository.find_by_id(saved.id) is None

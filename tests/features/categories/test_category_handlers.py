"""Tests for the category command and query handlers."""

import pytest

from neo_blog.application import DeleteResultDto
from neo_blog.core.exceptions import ArgumentOutOfRangeError, PostConditionError
from neo_blog.core.value_objects import Identifier
from neo_blog.features.categories.application.commands import (
    CreateCategoryCommand,
    CreateCategoryCommandHandler,
    DeleteCategoryCommand,
    DeleteCategoryCommandHandler,
    UpdateCategoryCommand,
    UpdateCategoryCommandHandler,
)
from neo_blog.features.categories.application.dtos import CategoryDto
from neo_blog.features.categories.application.queries import (
    GetAllCategoriesQuery,
    GetAllCategoriesQueryHandler,
    GetCategoryByIdQuery,
    GetCategoryByIdQueryHandler,
)
from neo_blog.features.categories.core import (
    Category,
    CategoryCreatedEvent,
    CategoryDeletedEvent,
    CategoryInUseError,
    CategoryName,
    CategoryNameAlreadyExistsError,
    CategoryNotFoundError,
    CategoryUpdatedEvent,
)
from neo_blog.features.posts.core import FindPostQuery


class TestCreateCategory:
    """Test category creation pipeline."""

    @pytest.fixture
    def handler(self, mock_category_repository, mock_event_publisher, mock_query_bus):
        return CreateCategoryCommandHandler(
            mock_category_repository, mock_event_publisher, mock_query_bus
        )

    @pytest.mark.asyncio
    async def test_create_category(
        self, handler, mock_category_repository, mock_event_publisher, mock_query_bus
    ):
        """Creating "Tech" saves, publishes one Created event and re-fetches."""
        mock_category_repository.find_by_name.return_value = None
        mock_query_bus.execute.return_value = CategoryDto(id=1, name="Tech")

        result = await handler.execute(CreateCategoryCommand(name="  Tech "))

        assert result == CategoryDto(id=1, name="Tech")
        mock_category_repository.save.assert_awaited_once()
        events = mock_event_publisher.publish_all.call_args.args[0]
        assert len(events) == 1
        assert isinstance(events[0], CategoryCreatedEvent)
        assert events[0].aggregate_id == Identifier(1)
        assert events[0].name == "Tech"
        mock_query_bus.execute.assert_awaited_once_with(GetCategoryByIdQuery(1))

    @pytest.mark.asyncio
    async def test_duplicate_name(
        self, handler, mock_category_repository, mock_event_publisher, sample_category
    ):
        mock_category_repository.find_by_name.return_value = sample_category

        with pytest.raises(CategoryNameAlreadyExistsError) as exc_info:
            await handler.execute(CreateCategoryCommand(name="Tech"))

        assert str(exc_info.value) == 'Category name "Tech" is already in use.'
        mock_category_repository.save.assert_not_called()
        mock_event_publisher.publish_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_entity_length_rule(self, handler, mock_category_repository):
        """Two characters pass the value object but not the entity."""
        mock_category_repository.find_by_name.return_value = None

        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            await handler.execute(CreateCategoryCommand(name="AI"))

        assert str(exc_info.value) == "Category name must be between 3 and 20 characters."
        mock_category_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_read_model(self, handler, mock_category_repository, mock_query_bus):
        mock_category_repository.find_by_name.return_value = None
        mock_query_bus.execute.return_value = None

        with pytest.raises(PostConditionError) as exc_info:
            await handler.execute(CreateCategoryCommand(name="Tech"))

        assert str(exc_info.value) == "Failed to fetch newly created category with ID: 1."


class TestUpdateCategory:
    @pytest.fixture
    def handler(self, mock_category_repository, mock_event_publisher, mock_query_bus):
        return UpdateCategoryCommandHandler(
            mock_category_repository, mock_event_publisher, mock_query_bus
        )

    @pytest.mark.asyncio
    async def test_rename(
        self, handler, mock_category_repository, mock_event_publisher, mock_query_bus, sample_category
    ):
        mock_category_repository.find_by_id.return_value = sample_category
        mock_category_repository.find_by_name.return_value = None
        mock_query_bus.execute.return_value = CategoryDto(id=1, name="Science")

        result = await handler.execute(UpdateCategoryCommand(category_id=1, name="Science"))

        assert result.name == "Science"
        event = mock_event_publisher.publish_all.call_args.args[0][0]
        assert isinstance(event, CategoryUpdatedEvent)
        assert (event.old_name, event.new_name) == ("Tech", "Science")

    @pytest.mark.asyncio
    async def test_same_name_is_noop(
        self, handler, mock_category_repository, mock_event_publisher, mock_query_bus, sample_category
    ):
        mock_category_repository.find_by_id.return_value = sample_category

        result = await handler.execute(UpdateCategoryCommand(category_id=1, name=" Tech "))

        assert result == CategoryDto(id=1, name="Tech")
        mock_category_repository.save.assert_not_called()
        mock_event_publisher.publish_all.assert_not_called()
        mock_query_bus.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_name_taken_by_other(self, handler, mock_category_repository, sample_category):
        mock_category_repository.find_by_id.return_value = sample_category
        mock_category_repository.find_by_name.return_value = Category.create(
            CategoryName.create("Science"), id=Identifier(2)
        )

        with pytest.raises(CategoryNameAlreadyExistsError):
            await handler.execute(UpdateCategoryCommand(category_id=1, name="Science"))

    @pytest.mark.asyncio
    async def test_unknown_category(self, handler, mock_category_repository):
        mock_category_repository.find_by_id.return_value = None

        with pytest.raises(CategoryNotFoundError) as exc_info:
            await handler.execute(UpdateCategoryCommand(category_id=9, name="Science"))

        assert str(exc_info.value) == "Category not found matching criteria: ID: 9"


class TestDeleteCategory:
    @pytest.fixture
    def handler(self, mock_category_repository, mock_post_repository, mock_event_publisher):
        return DeleteCategoryCommandHandler(
            mock_category_repository, mock_post_repository, mock_event_publisher
        )

    @pytest.mark.asyncio
    async def test_delete_unused_category(
        self, handler, mock_category_repository, mock_post_repository, mock_event_publisher, sample_category
    ):
        mock_category_repository.find_by_id.return_value = sample_category
        mock_post_repository.count.return_value = 0
        mock_category_repository.delete.return_value = True

        result = await handler.execute(DeleteCategoryCommand(category_id=1))

        assert result == DeleteResultDto(success=True)
        mock_post_repository.count.assert_awaited_once_with(FindPostQuery(category_id=Identifier(1)))
        event = mock_event_publisher.publish.call_args.args[0]
        assert isinstance(event, CategoryDeletedEvent)

    @pytest.mark.asyncio
    async def test_category_in_use(
        self, handler, mock_category_repository, mock_post_repository, sample_category
    ):
        mock_category_repository.find_by_id.return_value = sample_category
        mock_post_repository.count.return_value = 2

        with pytest.raises(CategoryInUseError) as exc_info:
            await handler.execute(DeleteCategoryCommand(category_id=1))

        assert str(exc_info.value) == (
            "Category ID 1 cannot be deleted as it is currently associated with posts."
        )
        mock_category_repository.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_returning_false(
        self, handler, mock_category_repository, mock_post_repository, mock_event_publisher, sample_category
    ):
        mock_category_repository.find_by_id.return_value = sample_category
        mock_post_repository.count.return_value = 0
        mock_category_repository.delete.return_value = False

        result = await handler.execute(DeleteCategoryCommand(category_id=1))

        assert result.success is False
        mock_event_publisher.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_category(self, handler, mock_category_repository):
        mock_category_repository.find_by_id.return_value = None

        with pytest.raises(CategoryNotFoundError) as exc_info:
            await handler.execute(DeleteCategoryCommand(category_id=3))

        assert "Category with ID 3 not found for deletion." in str(exc_info.value)


class TestCategoryQueries:
    @pytest.mark.asyncio
    async def test_get_by_id(self, mock_category_repository, sample_category):
        mock_category_repository.find_by_id.return_value = sample_category
        handler = GetCategoryByIdQueryHandler(mock_category_repository)

        assert await handler.execute(GetCategoryByIdQuery(1)) == CategoryDto(id=1, name="Tech")

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, mock_category_repository):
        mock_category_repository.find_by_id.return_value = None
        handler = GetCategoryByIdQueryHandler(mock_category_repository)

        assert await handler.execute(GetCategoryByIdQuery(1)) is None

    @pytest.mark.asyncio
    async def test_get_all_empty(self, mock_category_repository):
        mock_category_repository.find_all.return_value = []
        handler = GetAllCategoriesQueryHandler(mock_category_repository)

        assert await handler.execute(GetAllCategoriesQuery()) == []

"""Pytest configuration and fixtures for neo-blog tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from neo_blog.application import QueryBus
from neo_blog.config import BlogSettings
from neo_blog.core.protocols import EventPublisher
from neo_blog.core.value_objects import Identifier
from neo_blog.features.categories.core import Category, CategoryName, CategoryRepository
from neo_blog.features.comments.core import (
    Comment,
    CommentContent,
    CommentRepository,
    CommentResponse,
    CommentResponseRepository,
)
from neo_blog.features.posts.core import Post, PostContent, PostRepository, PostTitle
from neo_blog.features.users.core import Email, User, UserRepository, UserRole
from neo_blog.infrastructure.events import InMemoryEventBus
from neo_blog.infrastructure.security import BcryptPasswordHasher

FIXED_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def assigning_save(start: int = 1):
    """Repository ``save`` side effect that gives new entities sequential ids."""
    ids = iter(range(start, start + 1000))

    async def save(entity):
        if entity.is_new:
            entity.assign_id(Identifier(next(ids)))
        return entity

    return save


@pytest.fixture
def test_settings():
    """Settings for an in-memory app with cheap bcrypt rounds."""
    return BlogSettings(
        _env_file=None,
        storage_backend="memory",
        bcrypt_salt_rounds=4,
        jwt_secret="test-secret-key",
        log_level="WARNING",
    )


@pytest.fixture
def mock_event_publisher():
    """Mock event publisher for testing."""
    return AsyncMock(spec=EventPublisher)


@pytest.fixture
def mock_query_bus():
    """Mock query bus; tests set ``execute.return_value`` to the re-fetched DTO."""
    return AsyncMock(spec=QueryBus)


@pytest.fixture
def mock_user_repository():
    repository = AsyncMock(spec=UserRepository)
    repository.save.side_effect = assigning_save()
    return repository


@pytest.fixture
def mock_category_repository():
    repository = AsyncMock(spec=CategoryRepository)
    repository.save.side_effect = assigning_save()
    return repository


@pytest.fixture
def mock_post_repository():
    repository = AsyncMock(spec=PostRepository)
    repository.save.side_effect = assigning_save()
    return repository


@pytest.fixture
def mock_comment_repository():
    repository = AsyncMock(spec=CommentRepository)
    repository.save.side_effect = assigning_save()
    return repository


@pytest.fixture
def mock_comment_response_repository():
    repository = AsyncMock(spec=CommentResponseRepository)
    repository.save.side_effect = assigning_save()
    return repository


@pytest.fixture
def event_bus():
    return InMemoryEventBus()


@pytest.fixture
def password_hasher():
    """Bcrypt hasher with the minimum cost factor."""
    return BcryptPasswordHasher(salt_rounds=4)


@pytest.fixture
def sample_user():
    """Persisted USER with id 1."""
    return User.create(
        email=Email.create("jane@example.com"),
        username="jane",
        password="$2b$04$hash",
        created_at=FIXED_TIME,
        id=Identifier(1),
    )


@pytest.fixture
def sample_admin():
    """Persisted ADMIN with id 2."""
    return User.create(
        email=Email.create("admin@example.com"),
        username="admin",
        password="$2b$04$hash",
        role=UserRole.ADMIN,
        created_at=FIXED_TIME,
        id=Identifier(2),
    )


@pytest.fixture
def sample_category():
    """Persisted category "Tech" with id 1."""
    return Category.create(CategoryName.create("Tech"), id=Identifier(1))


@pytest.fixture
def sample_post(sample_user):
    """Persisted draft post by ``sample_user`` with id 10."""
    return Post.create(
        title=PostTitle.create("Hello"),
        content=PostContent.create("World"),
        author_id=sample_user.id,
        category_ids=[Identifier(1)],
        created_at=FIXED_TIME,
        id=Identifier(10),
    )


@pytest.fixture
def sample_published_post(sample_user):
    return Post.create(
        title=PostTitle.create("Live"),
        content=PostContent.create("Already out"),
        author_id=sample_user.id,
        published=True,
        created_at=FIXED_TIME,
        id=Identifier(11),
    )


@pytest.fixture
def sample_comment(sample_user, sample_post):
    """Persisted comment by ``sample_user`` on ``sample_post`` with id 5."""
    return Comment.create(
        content=CommentContent.create("Nice post"),
        post_id=sample_post.id,
        author_id=sample_user.id,
        created_at=FIXED_TIME,
        id=Identifier(5),
    )


@pytest.fixture
def sample_reply(sample_user, sample_comment):
    """Persisted reply to ``sample_comment`` with id 7."""
    return CommentResponse.create(
        content=CommentContent.create("Thanks"),
        author_id=sample_user.id,
        comment_id=sample_comment.id,
        post_id=sample_comment.post_id,
        created_at=FIXED_TIME,
        id=Identifier(7),
    )

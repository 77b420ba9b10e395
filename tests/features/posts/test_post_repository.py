"""Tests for the in-memory post repository."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from neo_blog.core.value_objects import Identifier
from neo_blog.features.comments.core import Comment, CommentContent, CommentResponse
from neo_blog.features.comments.infrastructure.repositories import (
    InMemoryCommentRepository,
    InMemoryCommentResponseRepository,
)
from neo_blog.features.posts.core import FindPostQuery, Post, PostContent, PostTitle
from neo_blog.features.posts.infrastructure.repositories import InMemoryPostRepository

START = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_post(title, author=1, published=False, categories=(), minutes=0):
    return Post.create(
        title=PostTitle.create(title),
        content=PostContent.create("Body"),
        author_id=Identifier(author),
        published=published,
        category_ids=[Identifier(c) for c in categories],
        created_at=START + timedelta(minutes=minutes),
    )


def make_comment(post_id, author=3):
    return Comment.create(
        content=CommentContent.create("Nice"), post_id=post_id, author_id=Identifier(author)
    )


def make_reply(comment_id, post_id, author=3):
    return CommentResponse.create(
        content=CommentContent.create("Thanks"),
        author_id=Identifier(author),
        comment_id=comment_id,
        post_id=post_id,
    )


@pytest_asyncio.fixture
async def repository():
    repository = InMemoryPostRepository()
    await repository.save(make_post("first", author=1, published=True, categories=[1], minutes=0))
    await repository.save(make_post("second", author=2, published=False, categories=[1, 2], minutes=1))
    await repository.save(make_post("third", author=1, published=True, categories=[2], minutes=2))
    return repository


class TestInMemoryPostRepository:
    @pytest.mark.asyncio
    async def test_newest_first(self, repository):
        titles = [p.title.value for p in await repository.find(FindPostQuery())]
        assert titles == ["third", "second", "first"]

    @pytest.mark.asyncio
    async def test_filters(self, repository):
        published = await repository.find(FindPostQuery(published=True))
        by_author = await repository.find(FindPostQuery(author_id=Identifier(2)))
        by_category = await repository.find(FindPostQuery(category_id=Identifier(2)))

        assert [p.title.value for p in published] == ["third", "first"]
        assert [p.title.value for p in by_author] == ["second"]
        assert [p.title.value for p in by_category] == ["third", "second"]

    @pytest.mark.asyncio
    async def test_paging_and_count(self, repository):
        query = FindPostQuery(skip=1, take=1)

        page = await repository.find(query)

        assert [p.title.value for p in page] == ["second"]
        assert await repository.count(query.without_paging()) == 3
        assert await repository.count(FindPostQuery(published=False)) == 1

    @pytest.mark.asyncio
    async def test_round_trip_keeps_categories(self, repository):
        loaded = await repository.find_by_id(Identifier(2))

        assert loaded.category_ids == (Identifier(1), Identifier(2))
        assert loaded.domain_events == ()

    @pytest.mark.asyncio
    async def test_update_and_delete(self, repository):
        post = await repository.find_by_id(Identifier(1))
        post.unpublish()
        await repository.save(post)

        assert (await repository.find_by_id(Identifier(1))).published is False
        assert await repository.delete(Identifier(1)) is True
        assert await repository.delete(Identifier(1)) is False
        assert await repository.find_by_id(Identifier(1)) is None


@pytest_asyncio.fixture
async def stores():
    comments = InMemoryCommentRepository(InMemoryCommentResponseRepository())
    posts = InMemoryPostRepository(comments)
    post = await posts.save(make_post("doomed", author=1))
    other = await posts.save(make_post("other", author=2))
    return posts, comments, post, other


class TestPostDeleteCascade:

    @pytest.mark.asyncio
    async def test_delete_drops_comments_and_replies(self, stores):
        posts, comments, post, other = stores
        comment = await comments.save(make_comment(post.id))
        reply = await comments.responses.save(make_reply(comment.id, post.id))
        survivor = await comments.save(make_comment(other.id))

        assert await posts.delete(post.id) is True

        assert await comments.find_by_id(comment.id) is None
        assert await comments.responses.find_by_id(reply.id) is None
        assert await comments.find_by_id(survivor.id) is not None

    @pytest.mark.asyncio
    async def test_remove_for_author(self, stores):
        posts, comments, post, other = stores
        comment = await comments.save(make_comment(post.id))

        assert posts.remove_for_author(Identifier(1)) == 1

        assert await posts.find_by_id(post.id) is None
        assert await posts.find_by_id(other.id) is not None
        assert await comments.find_by_id(comment.id) is None

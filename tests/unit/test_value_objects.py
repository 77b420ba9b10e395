"""Tests for the feature value objects."""

import pytest

from neo_blog.core.exceptions import (
    ArgumentInvalidError,
    ArgumentNotProvidedError,
    ArgumentOutOfRangeError,
)
from neo_blog.features.categories.core import CategoryName
from neo_blog.features.comments.core import CommentContent
from neo_blog.features.posts.core import PostContent, PostTitle
from neo_blog.features.users.core import Email


class TestCategoryName:
    def test_trims_value(self):
        assert CategoryName.create("  Tech  ").value == "Tech"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_is_not_provided(self, raw):
        with pytest.raises(ArgumentNotProvidedError) as exc_info:
            CategoryName.create(raw)
        assert str(exc_info.value) == "Category name cannot be empty."

    @pytest.mark.parametrize("raw", ["a", "x" * 51])
    def test_length_bounds(self, raw):
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            CategoryName.create(raw)
        assert str(exc_info.value) == "Category name must be between 2 and 50 characters."

    def test_equality_is_structural(self):
        assert CategoryName.create("Tech").equals(CategoryName.create(" Tech"))


class TestPostTitle:
    def test_stored_trimmed(self):
        assert PostTitle.create("  Hello ").value == "Hello"

    def test_blank_title(self):
        with pytest.raises(ArgumentNotProvidedError) as exc_info:
            PostTitle.create("   ")
        assert str(exc_info.value) == "Post title cannot be empty"

    def test_max_length(self):
        assert len(PostTitle.create("t" * 255).value) == 255
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            PostTitle.create("t" * 256)
        assert str(exc_info.value) == "Post title cannot exceed 255 characters"


class TestPostContent:
    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing_content(self, raw):
        with pytest.raises(ArgumentNotProvidedError) as exc_info:
            PostContent.create(raw)
        assert str(exc_info.value) == "Post content cannot be null, undefined or empty string"

    def test_whitespace_is_kept_verbatim(self):
        content = PostContent.create("   ")
        assert content.value == "   "
        assert content.is_blank

    def test_non_string_is_invalid(self):
        with pytest.raises(ArgumentInvalidError):
            PostContent.create(12)


class TestCommentContent:
    def test_trimmed(self):
        assert CommentContent.create("  hi  ").value == "hi"

    def test_blank(self):
        with pytest.raises(ArgumentNotProvidedError) as exc_info:
            CommentContent.create("  ")
        assert str(exc_info.value) == "Comment content cannot be empty."

    def test_max_length(self):
        assert CommentContent.create("c" * 1000).value == "c" * 1000
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            CommentContent.create("c" * 1001)
        assert str(exc_info.value) == "Comment content cannot exceed 1000 characters."


class TestEmail:
    def test_normalized(self):
        assert Email.create("  Jane@Example.COM ").value == "jane@example.com"

    def test_empty(self):
        with pytest.raises(ArgumentInvalidError) as exc_info:
            Email.create("")
        assert str(exc_info.value) == "Email cannot be empty"

    def test_bad_format(self):
        with pytest.raises(ArgumentInvalidError) as exc_info:
            Email.create("not-an-email")
        assert str(exc_info.value) == "Invalid email format: not-an-email"

    def test_too_long(self):
        with pytest.raises(ArgumentInvalidError) as exc_info:
            Email.create("a" * 45 + "@b.com")
        assert str(exc_info.value) == "Email cannot exceed 50 characters"

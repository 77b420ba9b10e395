"""Post aggregate.

Two publication states exist, draft and published. ``publish`` only moves
a draft with non-blank content forward and ``unpublish`` only moves a
published post back; every other transition raises.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from ....core.entities import BaseEntity
from ....core.events import utc_now
from ....core.exceptions import ArgumentInvalidError, ArgumentNotProvidedError
from ....core.value_objects import Identifier
from .events import (
    PostCreatedEvent,
    PostPublishedEvent,
    PostUnpublishedEvent,
    PostUpdatedEvent,
)
from .exceptions import (
    PostContentMissingError,
    PostIsAlreadyPublishedError,
    PostIsNotPublishedError,
)
from .value_objects import PostContent, PostTitle


def _unique(ids: Iterable[Identifier]) -> List[Identifier]:
    seen = set()
    result = []
    for category_id in ids:
        if category_id.value not in seen:
            seen.add(category_id.value)
            result.append(category_id)
    return result


class Post(BaseEntity):
    """A blog post. Construct through ``Post.create``."""

    def __init__(
        self,
        title: PostTitle,
        content: PostContent,
        author_id: Identifier,
        published: bool,
        category_ids: List[Identifier],
        created_at: datetime,
        updated_at: datetime,
        id: Optional[Identifier] = None,
    ):
        super().__init__(id)
        self._title = title
        self._content = content
        self._author_id = author_id
        self._published = published
        self._category_ids = category_ids
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        title: PostTitle,
        content: PostContent,
        author_id: Identifier,
        published: bool = False,
        category_ids: Optional[Iterable[Identifier]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[Identifier] = None,
    ) -> "Post":
        """Validate and build a post; new posts stage PostCreatedEvent."""
        if title is None:
            raise ArgumentNotProvidedError("Post title is required")
        if content is None:
            raise ArgumentNotProvidedError("Post content is required")
        if author_id is None:
            raise ArgumentNotProvidedError("Post author is required")
        if not isinstance(author_id, Identifier):
            raise ArgumentInvalidError("Post author must be an Identifier")

        now = utc_now()
        post = cls(
            title=title,
            content=content,
            author_id=author_id,
            published=bool(published),
            category_ids=_unique(category_ids or []),
            created_at=created_at or now,
            updated_at=updated_at or created_at or now,
            id=id,
        )
        if post.is_new:
            post.add_domain_event(PostCreatedEvent(aggregate_id=post.id, author_id=author_id))
        return post

    # --- read access ---

    @property
    def title(self) -> PostTitle:
        return self._title

    @property
    def content(self) -> PostContent:
        return self._content

    @property
    def author_id(self) -> Identifier:
        return self._author_id

    @property
    def published(self) -> bool:
        return self._published

    @property
    def category_ids(self) -> Tuple[Identifier, ...]:
        return tuple(self._category_ids)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_authored_by(self, user_id: Identifier) -> bool:
        return self._author_id == user_id

    # --- mutations ---

    def update_title(self, new_title: PostTitle) -> bool:
        if new_title is None:
            raise ArgumentNotProvidedError("Post title is required")
        if self._title == new_title:
            return False
        self._title = new_title
        self._changed("title")
        return True

    def update_content(self, new_content: PostContent) -> bool:
        if new_content is None:
            raise ArgumentNotProvidedError("Post content is required")
        if self._content == new_content:
            return False
        self._content = new_content
        self._changed("content")
        return True

    def add_category(self, category_id: Identifier) -> bool:
        if any(existing == category_id for existing in self._category_ids):
            return False
        self._category_ids.append(category_id)
        self._changed("categories")
        return True

    def remove_category(self, category_id: Identifier) -> bool:
        remaining = [existing for existing in self._category_ids if existing != category_id]
        if len(remaining) == len(self._category_ids):
            return False
        self._category_ids = remaining
        self._changed("categories")
        return True

    def replace_categories(self, category_ids: Iterable[Identifier]) -> bool:
        """Make ``category_ids`` the complete category set."""
        new_ids = _unique(category_ids)
        if {c.value for c in new_ids} == {c.value for c in self._category_ids}:
            return False
        self._category_ids = new_ids
        self._changed("categories")
        return True

    def publish(self) -> None:
        if self._published:
            raise PostIsAlreadyPublishedError(self.id.value)
        if self._content is None or self._content.is_blank:
            raise PostContentMissingError()
        self._published = True
        self._touch()
        self.add_domain_event(PostPublishedEvent(aggregate_id=self.id))

    def unpublish(self) -> None:
        if not self._published:
            raise PostIsNotPublishedError(self.id.value)
        self._published = False
        self._touch()
        self.add_domain_event(PostUnpublishedEvent(aggregate_id=self.id))

    def _changed(self, field_name: str) -> None:
        self._touch()
        self.add_domain_event(
            PostUpdatedEvent(aggregate_id=self.id, changed_fields=(field_name,))
        )

    def _touch(self) -> None:
        self._updated_at = utc_now()

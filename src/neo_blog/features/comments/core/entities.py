"""Comment and reply aggregates.

A comment belongs to one post and owns an ordered list of replies. A reply
records both its parent comment and the post so it can be fetched on its
own.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from ....core.entities import BaseEntity
from ....core.events import utc_now
from ....core.exceptions import ArgumentInvalidError, ArgumentNotProvidedError
from ....core.value_objects import Identifier
from .events import (
    CommentCreatedEvent,
    CommentResponseAddedToCommentEvent,
    CommentResponseCreatedEvent,
    CommentResponseUpdatedEvent,
    CommentUpdatedEvent,
    ResponseRemovedFromCommentEvent,
)
from .value_objects import CommentContent


def _require_identifier(value: Optional[Identifier], message: str) -> Identifier:
    if value is None:
        raise ArgumentNotProvidedError(message)
    if not isinstance(value, Identifier):
        raise ArgumentInvalidError(f"{message}; expected an Identifier")
    return value


class CommentResponse(BaseEntity):
    """A reply to a comment."""

    def __init__(
        self,
        content: CommentContent,
        author_id: Identifier,
        comment_id: Identifier,
        post_id: Identifier,
        created_at: datetime,
        updated_at: datetime,
        id: Optional[Identifier] = None,
    ):
        super().__init__(id)
        self._content = content
        self._author_id = author_id
        self._comment_id = comment_id
        self._post_id = post_id
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        content: CommentContent,
        author_id: Identifier,
        comment_id: Identifier,
        post_id: Identifier,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[Identifier] = None,
    ) -> "CommentResponse":
        if content is None:
            raise ArgumentNotProvidedError("Response content is required")
        _require_identifier(author_id, "Response author is required")
        _require_identifier(comment_id, "Response parent comment is required")
        _require_identifier(post_id, "Response post is required")

        now = utc_now()
        response = cls(
            content=content,
            author_id=author_id,
            comment_id=comment_id,
            post_id=post_id,
            created_at=created_at or now,
            updated_at=updated_at or created_at or now,
            id=id,
        )
        if response.is_new:
            response.add_domain_event(
                CommentResponseCreatedEvent(aggregate_id=response.id, comment_id=comment_id)
            )
        return response

    @property
    def content(self) -> CommentContent:
        return self._content

    @property
    def author_id(self) -> Identifier:
        return self._author_id

    @property
    def comment_id(self) -> Identifier:
        return self._comment_id

    @property
    def post_id(self) -> Identifier:
        return self._post_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_authored_by(self, user_id: Identifier) -> bool:
        return self._author_id == user_id

    def update_content(self, new_content: CommentContent) -> bool:
        if new_content is None:
            raise ArgumentNotProvidedError("Response content is required")
        if self._content == new_content:
            return False
        self._content = new_content
        self._updated_at = utc_now()
        self.add_domain_event(
            CommentResponseUpdatedEvent(aggregate_id=self.id, comment_id=self._comment_id)
        )
        return True


class Comment(BaseEntity):
    """A comment on a post. Construct through ``Comment.create``."""

    def __init__(
        self,
        content: CommentContent,
        post_id: Identifier,
        author_id: Identifier,
        responses: List[CommentResponse],
        created_at: datetime,
        updated_at: datetime,
        id: Optional[Identifier] = None,
    ):
        super().__init__(id)
        self._content = content
        self._post_id = post_id
        self._author_id = author_id
        self._responses = responses
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        content: CommentContent,
        post_id: Identifier,
        author_id: Identifier,
        responses: Optional[Iterable[CommentResponse]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        id: Optional[Identifier] = None,
    ) -> "Comment":
        """Validate and build a comment; new comments stage CommentCreatedEvent."""
        if content is None:
            raise ArgumentNotProvidedError("Comment content is required")
        _require_identifier(author_id, "Comment author is required")
        _require_identifier(post_id, "Comment post is required")

        now = utc_now()
        comment = cls(
            content=content,
            post_id=post_id,
            author_id=author_id,
            responses=list(responses or []),
            created_at=created_at or now,
            updated_at=updated_at or created_at or now,
            id=id,
        )
        if comment.is_new:
            comment.add_domain_event(
                CommentCreatedEvent(aggregate_id=comment.id, post_id=post_id, author_id=author_id)
            )
        return comment

    @property
    def content(self) -> CommentContent:
        return self._content

    @property
    def post_id(self) -> Identifier:
        return self._post_id

    @property
    def author_id(self) -> Identifier:
        return self._author_id

    @property
    def responses(self) -> Tuple[CommentResponse, ...]:
        return tuple(self._responses)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_authored_by(self, user_id: Identifier) -> bool:
        return self._author_id == user_id

    def update_content(self, new_content: CommentContent) -> bool:
        if new_content is None:
            raise ArgumentNotProvidedError("Comment content is required")
        if self._content == new_content:
            return False
        self._content = new_content
        self._updated_at = utc_now()
        self.add_domain_event(CommentUpdatedEvent(aggregate_id=self.id))
        return True

    def add_response(self, response: CommentResponse) -> bool:
        """Attach a persisted reply; returns False when already attached."""
        if response is None:
            raise ArgumentNotProvidedError("Response is required")
        if response.comment_id != self.id:
            raise ArgumentInvalidError(
                f"Response does not belong to comment {self.id.value}"
            )
        if any(existing == response for existing in self._responses):
            return False
        self._responses.append(response)
        self.add_domain_event(
            CommentResponseAddedToCommentEvent(aggregate_id=self.id, response_id=response.id)
        )
        return True

    def remove_response(self, response_id: Identifier) -> bool:
        remaining = [r for r in self._responses if r.id != response_id]
        if len(remaining) == len(self._responses):
            return False
        self._responses = remaining
        self.add_domain_event(
            ResponseRemovedFromCommentEvent(aggregate_id=self.id, response_id=response_id)
        )
        return True

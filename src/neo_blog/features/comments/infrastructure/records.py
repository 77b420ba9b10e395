"""Row codecs shared by the comment repositories."""

from typing import Any, Dict, Iterable, Mapping

from ....core.value_objects import Identifier
from ..core.entities import Comment, CommentResponse
from ..core.value_objects import CommentContent


def comment_to_record(comment: Comment) -> Dict[str, Any]:
    return {
        "id": comment.id.value,
        "content": comment.content.value,
        "post_id": comment.post_id.value,
        "author_id": comment.author_id.value,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def comment_from_record(row: Mapping[str, Any], responses: Iterable[CommentResponse] = ()) -> Comment:
    return Comment.create(
        content=CommentContent(row["content"]),
        post_id=Identifier(row["post_id"]),
        author_id=Identifier(row["author_id"]),
        responses=responses,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        id=Identifier(row["id"]),
    )


def response_to_record(response: CommentResponse) -> Dict[str, Any]:
    return {
        "id": response.id.value,
        "content": response.content.value,
        "comment_id": response.comment_id.value,
        "post_id": response.post_id.value,
        "author_id": response.author_id.value,
        "created_at": response.created_at,
        "updated_at": response.updated_at,
    }


def response_from_record(row: Mapping[str, Any]) -> CommentResponse:
    return CommentResponse.create(
        content=CommentContent(row["content"]),
        author_id=Identifier(row["author_id"]),
        comment_id=Identifier(row["comment_id"]),
        post_id=Identifier(row["post_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        id=Identifier(row["id"]),
    )

"""Comment errors."""

from ....core.exceptions import ResourceNotFoundError


class CommentNotFoundError(ResourceNotFoundError):
    resource = "Comment"


class CommentResponseNotFoundError(ResourceNotFoundError):
    resource = "Comment Response"


class ParentCommentNotFoundError(ResourceNotFoundError):
    """The comment a reply targets does not exist."""
    resource = "Parent comment"


class PostNotFoundForCommentError(ResourceNotFoundError):
    """The post a comment targets does not exist."""
    resource = "Post"

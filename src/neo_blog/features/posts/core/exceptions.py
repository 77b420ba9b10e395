"""Post errors."""

from ....core.exceptions import InvalidStateError, ResourceNotFoundError


class PostNotFoundError(ResourceNotFoundError):
    resource = "Post"


class PostContentMissingError(InvalidStateError):
    """Blank content cannot be published."""

    def __init__(self, message: str = "Post content cannot be empty when publishing."):
        super().__init__(message)


class PostIsAlreadyPublishedError(InvalidStateError):
    def __init__(self, post_id: int):
        super().__init__(
            f"Post with ID {post_id} is already published.", details={"post_id": post_id}
        )


class PostIsNotPublishedError(InvalidStateError):
    def __init__(self, post_id: int):
        super().__init__(
            f"Post with ID {post_id} is not published.", details={"post_id": post_id}
        )

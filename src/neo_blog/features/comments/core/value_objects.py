"""Comment value objects."""

from dataclasses import dataclass

from ....core.exceptions import (
    ArgumentInvalidError,
    ArgumentNotProvidedError,
    ArgumentOutOfRangeError,
)

COMMENT_CONTENT_MAX_LENGTH = 1000


@dataclass(frozen=True)
class CommentContent:
    """Trimmed comment or reply text, 1 to 1000 characters."""

    value: str

    def __post_init__(self):
        if self.value is not None and not isinstance(self.value, str):
            raise ArgumentInvalidError("Comment content must be a string.")

        normalized = (self.value or "").strip()
        if not normalized:
            raise ArgumentNotProvidedError("Comment content cannot be empty.")
        if len(normalized) > COMMENT_CONTENT_MAX_LENGTH:
            raise ArgumentOutOfRangeError(
                f"Comment content cannot exceed {COMMENT_CONTENT_MAX_LENGTH} characters."
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, raw: str) -> "CommentContent":
        return cls(raw)

    def equals(self, other: object) -> bool:
        return self == other

"""Post value objects."""

from dataclasses import dataclass

from ....core.exceptions import (
    ArgumentInvalidError,
    ArgumentNotProvidedError,
    ArgumentOutOfRangeError,
)

POST_TITLE_MAX_LENGTH = 255


@dataclass(frozen=True)
class PostTitle:
    """Non-blank title of at most 255 characters, stored trimmed."""

    value: str

    def __post_init__(self):
        if self.value is not None and not isinstance(self.value, str):
            raise ArgumentInvalidError("Post title must be a string")
        if not self.value or not self.value.strip():
            raise ArgumentNotProvidedError("Post title cannot be empty")

        normalized = self.value.strip()
        if len(normalized) > POST_TITLE_MAX_LENGTH:
            raise ArgumentOutOfRangeError(
                f"Post title cannot exceed {POST_TITLE_MAX_LENGTH} characters"
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, raw: str) -> "PostTitle":
        return cls(raw)

    def equals(self, other: object) -> bool:
        return self == other


@dataclass(frozen=True)
class PostContent:
    """Post body. Kept verbatim; publishing separately requires non-blank text."""

    value: str

    def __post_init__(self):
        if self.value is not None and not isinstance(self.value, str):
            raise ArgumentInvalidError("Post content must be a string")
        if not self.value:
            raise ArgumentNotProvidedError("Post content cannot be null, undefined or empty string")

    @classmethod
    def create(cls, raw: str) -> "PostContent":
        return cls(raw)

    @property
    def is_blank(self) -> bool:
        return not self.value.strip()

    def equals(self, other: object) -> bool:
        return self == other

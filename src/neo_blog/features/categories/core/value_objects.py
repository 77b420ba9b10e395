"""Category value objects."""

from dataclasses import dataclass

from ....core.exceptions import (
    ArgumentInvalidError,
    ArgumentNotProvidedError,
    ArgumentOutOfRangeError,
)

CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 50


@dataclass(frozen=True)
class CategoryName:
    """Trimmed category name, 2 to 50 characters."""

    value: str

    def __post_init__(self):
        if self.value is None:
            raise ArgumentNotProvidedError("Category name cannot be empty.")
        if not isinstance(self.value, str):
            raise ArgumentInvalidError("Category name must be a string.")

        normalized = self.value.strip()
        if not normalized:
            raise ArgumentNotProvidedError("Category name cannot be empty.")
        if not CATEGORY_NAME_MIN_LENGTH <= len(normalized) <= CATEGORY_NAME_MAX_LENGTH:
            raise ArgumentOutOfRangeError(
                f"Category name must be between {CATEGORY_NAME_MIN_LENGTH} "
                f"and {CATEGORY_NAME_MAX_LENGTH} characters."
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, raw: str) -> "CategoryName":
        return cls(raw)

    def equals(self, other: object) -> bool:
        return self == other

    def __str__(self) -> str:
        return self.value

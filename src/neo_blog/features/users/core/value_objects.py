"""User value objects."""

import re
from dataclasses import dataclass

from ....core.exceptions import ArgumentInvalidError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
EMAIL_MAX_LENGTH = 50


@dataclass(frozen=True)
class Email:
    """Lower-cased, trimmed e-mail address of at most 50 characters."""

    value: str

    def __post_init__(self):
        if self.value is not None and not isinstance(self.value, str):
            raise ArgumentInvalidError("Email must be a string")

        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise ArgumentInvalidError("Email cannot be empty")
        if not EMAIL_PATTERN.match(normalized):
            raise ArgumentInvalidError(f"Invalid email format: {normalized}")
        if len(normalized) > EMAIL_MAX_LENGTH:
            raise ArgumentInvalidError(f"Email cannot exceed {EMAIL_MAX_LENGTH} characters")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, raw: str) -> "Email":
        return cls(raw)

    def equals(self, other: object) -> bool:
        return self == other

    def __str__(self) -> str:
        return self.value

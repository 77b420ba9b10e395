"""Numeric aggregate identifier."""

from dataclasses import dataclass
from typing import Any

from ..exceptions import (
    ArgumentNotProvidedError,
    ArgumentOutOfRangeError,
    ArgumentInvalidError,
)


@dataclass(frozen=True)
class Identifier:
    """Opaque wrapper around an integer primary key.

    Two identifiers are equal iff their values are equal. The value ``0``
    marks an aggregate that has not been persisted yet.
    """

    value: int

    def __post_init__(self):
        if self.value is None:
            raise ArgumentNotProvidedError("Identifier cannot be null or undefined")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ArgumentInvalidError(f"Identifier must be an integer, got {self.value!r}")
        if self.value < 0:
            raise ArgumentOutOfRangeError(f"Identifier cannot be negative: {self.value}")

    @classmethod
    def create(cls, value: Any) -> "Identifier":
        """Build an identifier from an int or a digit string."""
        if isinstance(value, Identifier):
            return value
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped.isdigit():
                raise ArgumentInvalidError(f"Identifier must be numeric, got {value!r}")
            value = int(stripped)
        return cls(value)

    @classmethod
    def new(cls) -> "Identifier":
        """Sentinel for an aggregate that has no database row yet."""
        return cls(0)

    @property
    def is_new(self) -> bool:
        return self.value == 0

    def equals(self, other: object) -> bool:
        return self == other

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

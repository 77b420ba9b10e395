"""Password hashing protocol."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way password hashing used by user creation and login.

    Both operations are deliberately slow, so implementations must not block
    the event loop while they run.
    """

    @abstractmethod
    async def hash(self, plain: str) -> str:
        """Return a salted hash of ``plain``."""
        ...

    @abstractmethod
    async def compare(self, plain: str, hashed: str) -> bool:
        """Return True when ``plain`` matches ``hashed``; never raises on bad input."""
        ...

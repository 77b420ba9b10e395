"""Post repositories."""

from .asyncpg_post_repository import AsyncPGPostRepository
from .memory_post_repository import InMemoryPostRepository

__all__ = ["AsyncPGPostRepository", "InMemoryPostRepository"]

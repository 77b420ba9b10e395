"""Category repositories."""

from .asyncpg_category_repository import AsyncPGCategoryRepository
from .memory_category_repository import InMemoryCategoryRepository

__all__ = ["AsyncPGCategoryRepository", "InMemoryCategoryRepository"]

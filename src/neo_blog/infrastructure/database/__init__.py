"""asyncpg connection management and schema."""

from .connection import DatabaseManager, rows_affected
from .schema import SCHEMA_STATEMENTS

__all__ = ["DatabaseManager", "rows_affected", "SCHEMA_STATEMENTS"]

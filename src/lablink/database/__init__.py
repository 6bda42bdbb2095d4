"""Database connection management and schema for lablink."""

from .connection import DatabaseManager, create_database_manager
from .schema import SCHEMA_STATEMENTS

__all__ = [
    "DatabaseManager",
    "create_database_manager",
    "SCHEMA_STATEMENTS",
]

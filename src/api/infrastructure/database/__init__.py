"""Database infrastructure - shared engine, session and ORM primitives."""

from infrastructure.database.exceptions import is_missing_table_error

__all__ = [
    "is_missing_table_error",
]

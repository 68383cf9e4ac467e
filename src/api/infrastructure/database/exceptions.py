"""Classification of errors raised by database calls."""

from __future__ import annotations

# PostgreSQL SQLSTATE for "undefined_table"
UNDEFINED_TABLE_SQLSTATE = "42P01"


def is_missing_table_error(error: BaseException, table: str) -> bool:
    """Tell whether an error was raised because ``table`` does not exist.

    Recognizes the SQLite message (``no such table: <table>``), the
    PostgreSQL message (``relation "<table>" does not exist``) and the
    PostgreSQL SQLSTATE carried by the driver exception wrapped in a
    SQLAlchemy ``DBAPIError``.

    Args:
        error: The exception raised by the data access call
        table: Unqualified table name

    Returns:
        True only for a missing-table condition on the given table
    """
    message = str(error)
    if f"no such table: {table}" in message:
        return True
    if f'relation "{table}" does not exist' in message:
        return True

    original = getattr(error, "orig", None)
    sqlstate = getattr(original, "sqlstate", None) or getattr(
        original, "pgcode", None
    )
    return sqlstate == UNDEFINED_TABLE_SQLSTATE and table in str(original)

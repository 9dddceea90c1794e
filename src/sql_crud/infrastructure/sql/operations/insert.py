"""
SQL INSERT statement builder.
"""

from typing import Sequence

from ..core.identifier import quote_identifier
from ..dialects.base import Dialect


def build_insert(
    dialect: Dialect,
    table: str,
    columns: Sequence[str],
    placeholders: Sequence[str],
) -> str:
    """
    Build a simple INSERT statement.

    Args:
        dialect: Dialect used for identifier quoting
        table: Table name
        columns: Column names, in binding order
        placeholders: One placeholder per column

    Returns:
        INSERT SQL statement

    Example:
        >>> build_insert(Dialect.ANY, "records", ["name"], ["?"])
        'INSERT INTO "records" ("name") VALUES (?)'
    """
    if len(columns) != len(placeholders):
        raise ValueError(
            f"INSERT into {table} has {len(columns)} columns but "
            f"{len(placeholders)} placeholders"
        )
    quoted_table = quote_identifier(table, dialect)
    quoted_cols = ", ".join(quote_identifier(c, dialect) for c in columns)
    values = ", ".join(placeholders)
    return f"INSERT INTO {quoted_table} ({quoted_cols}) VALUES ({values})"

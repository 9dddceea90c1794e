"""
SQL SELECT statement builders.
"""

from typing import Optional, Sequence

from ..core.identifier import qualify_column, quote_identifier
from ..dialects.base import Dialect


def build_select(
    dialect: Dialect,
    table: str,
    columns: Sequence[str],
    soft_delete_column: Optional[str] = None,
) -> str:
    """
    Build a SELECT of every row, skipping soft-deleted rows when applicable.

    Columns are projected table-qualified, in the order given.

    Example:
        >>> build_select(Dialect.MYSQL, "items", ["id", "name"], "deleted_at")
        'SELECT `items`.`id`, `items`.`name` FROM `items` WHERE `deleted_at` IS NULL'
    """
    sql = f"SELECT {_projection(dialect, table, columns)} FROM {quote_identifier(table, dialect)}"
    if soft_delete_column:
        sql += f" WHERE {quote_identifier(soft_delete_column, dialect)} IS NULL"
    return sql


def build_select_by_id(
    dialect: Dialect,
    table: str,
    columns: Sequence[str],
    id_column: str,
    id_placeholder: str,
    soft_delete_column: Optional[str] = None,
) -> str:
    """
    Build a SELECT of at most one row matching the identity column.

    Example:
        >>> build_select_by_id(Dialect.ANY, "items", ["id"], "id", "?")
        'SELECT "items"."id" FROM "items" WHERE "items"."id" = ? LIMIT 1'
    """
    conditions = [f"{qualify_column(table, id_column, dialect)} = {id_placeholder}"]
    if soft_delete_column:
        conditions.append(f"{quote_identifier(soft_delete_column, dialect)} IS NULL")
    return (
        f"SELECT {_projection(dialect, table, columns)} "
        f"FROM {quote_identifier(table, dialect)} "
        f"WHERE {' AND '.join(conditions)} LIMIT 1"
    )


def _projection(dialect: Dialect, table: str, columns: Sequence[str]) -> str:
    return ", ".join(qualify_column(table, c, dialect) for c in columns)

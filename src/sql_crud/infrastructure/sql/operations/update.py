"""
SQL UPDATE statement builders.

Both builders put the identity placeholder last, after every SET placeholder,
so the identity value is always the final bound argument.
"""

from typing import Optional, Sequence

from ..core.identifier import qualify_column, quote_identifier
from ..dialects.base import Dialect


def build_update_by_id(
    dialect: Dialect,
    table: str,
    columns: Sequence[str],
    placeholders: Sequence[str],
    id_column: str,
    id_placeholder: str,
    soft_delete_column: Optional[str] = None,
) -> str:
    """
    Build an UPDATE of one row identified by its identity column.

    Args:
        dialect: Dialect used for identifier quoting
        table: Table name
        columns: Columns to SET, in binding order (identity excluded)
        placeholders: One placeholder per SET column
        id_column: Identity column name
        id_placeholder: Placeholder for the identity value
        soft_delete_column: When given, soft-deleted rows are left untouched

    Example:
        >>> build_update_by_id(Dialect.ANY, "items", ["name"], ["?"], "id", "?")
        'UPDATE "items" SET "name" = ? WHERE "items"."id" = ?'
    """
    if not columns or len(columns) != len(placeholders):
        raise ValueError(
            f"UPDATE of {table} needs one placeholder per column, got "
            f"{len(columns)} columns and {len(placeholders)} placeholders"
        )
    assignments = ", ".join(
        f"{quote_identifier(c, dialect)} = {p}" for c, p in zip(columns, placeholders)
    )
    return (
        f"UPDATE {quote_identifier(table, dialect)} SET {assignments} "
        f"WHERE {_by_id(dialect, table, id_column, id_placeholder, soft_delete_column)}"
    )


def build_soft_delete_by_id(
    dialect: Dialect,
    table: str,
    soft_delete_column: str,
    deleted_with: str,
    id_column: str,
    id_placeholder: str,
) -> str:
    """
    Build the masked UPDATE that soft-deletes one row.

    ``deleted_with`` is SQL source text and is inserted verbatim; it must come
    from a trusted, static declaration and never from user input.

    Example:
        >>> build_soft_delete_by_id(Dialect.ANY, "items", "deleted_at", "NOW()", "id", "?")
        'UPDATE "items" SET "deleted_at" = NOW() WHERE "items"."id" = ? AND "deleted_at" IS NULL'
    """
    quoted_column = quote_identifier(soft_delete_column, dialect)
    return (
        f"UPDATE {quote_identifier(table, dialect)} SET {quoted_column} = {deleted_with} "
        f"WHERE {_by_id(dialect, table, id_column, id_placeholder, soft_delete_column)}"
    )


def _by_id(
    dialect: Dialect,
    table: str,
    id_column: str,
    id_placeholder: str,
    soft_delete_column: Optional[str],
) -> str:
    condition = f"{qualify_column(table, id_column, dialect)} = {id_placeholder}"
    if soft_delete_column:
        condition += f" AND {quote_identifier(soft_delete_column, dialect)} IS NULL"
    return condition

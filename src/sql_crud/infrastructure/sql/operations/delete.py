"""
SQL DELETE statement builder.
"""

from ..core.identifier import qualify_column, quote_identifier
from ..dialects.base import Dialect


def build_delete_by_id(
    dialect: Dialect, table: str, id_column: str, id_placeholder: str
) -> str:
    """
    Build a DELETE of one row identified by its identity column.

    Example:
        >>> build_delete_by_id(Dialect.MYSQL, "records", "record_id", "?")
        'DELETE FROM `records` WHERE `records`.`record_id` = ?'
    """
    return (
        f"DELETE FROM {quote_identifier(table, dialect)} "
        f"WHERE {qualify_column(table, id_column, dialect)} = {id_placeholder}"
    )

"""Standard timestamp fields for record types.

Usage:
    >>> fields = (
    ...     FieldDef("timed_field_id", ColumnType.INTEGER, identity=True),
    ...     FieldDef("str_field"),
    ...     *timed_fields(),
    ... )
"""

from typing import Tuple

from .core import ColumnType, FieldDef

DEFAULT_DELETED_WITH = "CURRENT_TIMESTAMP"


def timed_fields(deleted_with: str = DEFAULT_DELETED_WITH) -> Tuple[FieldDef, ...]:
    """
    Build the created_at, updated_at and deleted_at fields.

    All three are maintained by the database (column defaults and ON UPDATE
    clauses) or by the soft delete, so none of them is written by insert or
    update. ``deleted_at`` becomes the soft-delete column.

    Args:
        deleted_with: SQL expression stored in deleted_at on delete

    Returns:
        The three field definitions, in the order created_at, updated_at, deleted_at
    """
    return (
        FieldDef(
            "created_at",
            ColumnType.DATETIME,
            ignore_on_insert=True,
            ignore_on_update=True,
        ),
        FieldDef(
            "updated_at",
            ColumnType.DATETIME,
            ignore_on_insert=True,
            ignore_on_update=True,
        ),
        FieldDef(
            "deleted_at",
            ColumnType.DATETIME,
            ignore_on_insert=True,
            ignore_on_update=True,
            deleted_with=deleted_with,
        ),
    )

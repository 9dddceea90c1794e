"""Core record schema types.

``FieldDef`` and ``RecordDef`` are what a record type declares. ``RecordSchema``
is what the resolver derives from them; it is frozen and shared by every
instance of the record type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple, Union

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from sql_crud.infrastructure.sql.dialects.base import Dialect


class ColumnType(Enum):
    """Supported column types for record schemas."""

    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"


@dataclass(frozen=True)
class FieldDef:
    """Definition of a single field of a record type."""

    name: str
    column_type: ColumnType = ColumnType.STRING
    identity: bool = False
    auto_increment: bool = False
    ignore_on_insert: bool = False
    ignore_on_update: bool = False
    # Trusted SQL source text spliced into the soft-delete UPDATE, never bound
    deleted_with: Optional[str] = None

    @property
    def is_soft_delete(self) -> bool:
        return self.deleted_with is not None


@dataclass(frozen=True)
class RecordDef:
    """Declarative description of a record type's table backing."""

    fields: Tuple[FieldDef, ...]
    table_name: Optional[str] = None
    dialect: Optional[Union[str, "Dialect"]] = None

    def __post_init__(self) -> None:
        # Accept any sequence of fields but store an immutable tuple
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class RecordSchema:
    """Resolved schema of a record type."""

    record_name: str
    table_name: str
    dialect: "Dialect"
    fields: Tuple[FieldDef, ...]
    identity: FieldDef
    insert_fields: Tuple[FieldDef, ...]
    update_fields: Tuple[FieldDef, ...]
    soft_delete: Optional[FieldDef] = None

    @property
    def columns(self) -> Tuple[str, ...]:
        """All column names in declaration order."""
        return tuple(f.name for f in self.fields)

    @property
    def insert_columns(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.insert_fields)

    @property
    def update_columns(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.update_fields)

    @property
    def auto_increment(self) -> bool:
        return self.identity.auto_increment


__all__ = [
    "ColumnType",
    "FieldDef",
    "RecordDef",
    "RecordSchema",
]

"""
Record schema definitions.

Resolution and registration live in ``resolver`` and ``registry``; they are
imported from there explicitly to keep this package free of SQL imports.
"""

from .core import ColumnType, FieldDef, RecordDef, RecordSchema
from .exceptions import (
    InvalidIdentifierError,
    SchemaDefinitionError,
    SoftDeleteExpressionError,
    UnsupportedDialectError,
    UnsupportedOperationError,
)
from .naming import to_table_name
from .timed import timed_fields

__all__ = [
    "ColumnType",
    "FieldDef",
    "RecordDef",
    "RecordSchema",
    "SchemaDefinitionError",
    "UnsupportedDialectError",
    "InvalidIdentifierError",
    "SoftDeleteExpressionError",
    "UnsupportedOperationError",
    "to_table_name",
    "timed_fields",
]

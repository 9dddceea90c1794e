"""Errors raised while resolving a record schema.

These represent programmer error in a record type declaration. Apart from
``UnsupportedOperationError`` they are raised when the record type is
defined, never when an operation runs.
"""


class SchemaDefinitionError(ValueError):
    """Raised when a record type declaration cannot be compiled into SQL."""


class UnsupportedDialectError(SchemaDefinitionError):
    """Raised when a record type selects an unknown SQL dialect."""


class InvalidIdentifierError(SchemaDefinitionError):
    """Raised when a table or column name cannot be safely quoted."""


class SoftDeleteExpressionError(SchemaDefinitionError):
    """Raised when a deleted_with expression is not a usable SQL expression."""


class UnsupportedOperationError(SchemaDefinitionError):
    """Raised when an operation has no statement for this record type.

    An identity-only record type has nothing to update, and a record type
    whose only insertable field is an auto-increment identity has nothing to
    insert.
    """


__all__ = [
    "SchemaDefinitionError",
    "UnsupportedDialectError",
    "InvalidIdentifierError",
    "SoftDeleteExpressionError",
    "UnsupportedOperationError",
]

"""Schema resolution for record types.

Turns a declarative ``RecordDef`` into a ``RecordSchema``: picks the identity
column, splits the fields into insert and update sets, finds the soft-delete
column and validates everything that could otherwise produce broken SQL.
All failures are raised here, when the record type is defined.
"""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from sql_crud.infrastructure.sql.core.identifier import is_quotable
from sql_crud.infrastructure.sql.dialects.base import Dialect, parse_dialect

from .core import FieldDef, RecordDef, RecordSchema
from .exceptions import (
    InvalidIdentifierError,
    SchemaDefinitionError,
    SoftDeleteExpressionError,
)
from .naming import to_table_name

_FORBIDDEN_EXPRESSION_TOKENS = (";", "--", "/*", "*/")


def resolve_schema(
    record_name: str,
    record_def: RecordDef,
    default_dialect: Union[str, Dialect] = Dialect.SQLITE,
) -> RecordSchema:
    """
    Resolve a record declaration into its schema.

    Args:
        record_name: Name of the record type, used to derive the table name
        record_def: Field list and table-backing options
        default_dialect: Dialect used when the declaration selects none

    Returns:
        The resolved RecordSchema

    Raises:
        SchemaDefinitionError: If the declaration cannot produce valid SQL
    """
    fields = record_def.fields
    if not fields:
        raise SchemaDefinitionError(f"Record type '{record_name}' declares no fields")

    _check_field_names(record_name, fields)

    table_name = record_def.table_name or to_table_name(record_name)
    if not is_quotable(table_name):
        raise InvalidIdentifierError(
            f"Table name {table_name!r} of record type '{record_name}' is not a "
            "valid identifier"
        )

    dialect = parse_dialect(
        record_def.dialect if record_def.dialect is not None else default_dialect
    )
    identity = _resolve_identity(record_name, fields)
    soft_delete = _resolve_soft_delete(record_name, fields, identity)

    # Either set may be empty (identity-only or auto-increment-only tables);
    # the matching statement is then not compiled.
    insert_fields = tuple(
        f
        for f in fields
        if not f.ignore_on_insert and not (f is identity and identity.auto_increment)
    )
    update_fields = tuple(
        f for f in fields if f is not identity and not f.ignore_on_update
    )

    return RecordSchema(
        record_name=record_name,
        table_name=table_name,
        dialect=dialect,
        fields=fields,
        identity=identity,
        insert_fields=insert_fields,
        update_fields=update_fields,
        soft_delete=soft_delete,
    )


def _check_field_names(record_name: str, fields: Tuple[FieldDef, ...]) -> None:
    seen = set()
    for field in fields:
        if not isinstance(field, FieldDef):
            raise SchemaDefinitionError(
                f"Record type '{record_name}' declares {field!r}, expected a FieldDef"
            )
        if not field.name.isidentifier():
            raise InvalidIdentifierError(
                f"Field name {field.name!r} of record type '{record_name}' is not a "
                "valid identifier"
            )
        if field.name in seen:
            raise SchemaDefinitionError(
                f"Record type '{record_name}' declares field '{field.name}' twice"
            )
        seen.add(field.name)


def _resolve_identity(record_name: str, fields: Tuple[FieldDef, ...]) -> FieldDef:
    flagged = [f for f in fields if f.identity]
    if len(flagged) > 1:
        names = [f.name for f in flagged]
        raise SchemaDefinitionError(
            f"Record type '{record_name}' marks more than one identity field: {names}. "
            "Composite keys are not supported"
        )
    # Default to the first declared field
    identity = flagged[0] if flagged else fields[0]

    for field in fields:
        if field.auto_increment and field is not identity:
            raise SchemaDefinitionError(
                f"Field '{field.name}' of record type '{record_name}' is marked "
                f"auto_increment but the identity field is '{identity.name}'"
            )
    return identity


def _resolve_soft_delete(
    record_name: str, fields: Tuple[FieldDef, ...], identity: FieldDef
) -> Optional[FieldDef]:
    candidates: List[FieldDef] = [f for f in fields if f.is_soft_delete]
    if not candidates:
        return None
    if len(candidates) > 1:
        names = [f.name for f in candidates]
        raise SchemaDefinitionError(
            f"Record type '{record_name}' declares more than one deleted_with field: "
            f"{names}"
        )
    soft_delete = candidates[0]
    if soft_delete is identity:
        raise SchemaDefinitionError(
            f"Identity field '{identity.name}' of record type '{record_name}' cannot "
            "be the soft-delete column"
        )
    validate_deleted_with(soft_delete.deleted_with, soft_delete.name)
    return soft_delete


def validate_deleted_with(expression: Optional[str], field_name: str = "") -> str:
    """
    Check that a deleted_with expression is a single, self-contained SQL expression.

    The expression is spliced verbatim into the soft-delete statement, so it
    must be static, trusted text such as ``NOW()`` or ``CURRENT_TIMESTAMP``.

    Raises:
        SoftDeleteExpressionError: If the expression is empty, contains a
            statement separator or comment marker, or has unbalanced
            parentheses or quotes
    """
    label = f" on field '{field_name}'" if field_name else ""
    if not isinstance(expression, str) or not expression.strip():
        raise SoftDeleteExpressionError(
            f"deleted_with{label} must be a non-empty SQL expression, like 'NOW()'"
        )
    for token in _FORBIDDEN_EXPRESSION_TOKENS:
        if token in expression:
            raise SoftDeleteExpressionError(
                f"deleted_with{label} must not contain {token!r}: {expression!r}"
            )

    depth = 0
    quote: Optional[str] = None
    for ch in expression:
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                break
    if quote is not None or depth != 0:
        raise SoftDeleteExpressionError(
            f"deleted_with{label} has unbalanced parentheses or quotes: {expression!r}"
        )
    return expression

"""
Statement compilation for record schemas.

``compile_statements`` turns a resolved ``RecordSchema`` into the five SQL
statements every record type supports. Placeholders are emitted from the same
ordered field tuples (``insert_fields`` and ``update_fields``) that the record
runtime reads argument values from, so statement text and argument order
cannot drift apart.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from sql_crud.infrastructure.schema.core import RecordSchema

from .core.parameters import build_placeholders, placeholder, validate_paramstyle
from .operations.delete import build_delete_by_id
from .operations.insert import build_insert
from .operations.select import build_select, build_select_by_id
from .operations.update import build_soft_delete_by_id, build_update_by_id


@dataclass(frozen=True)
class CompiledStatements:
    """
    The compiled statement set of one record type.

    ``insert`` and ``update_by_id`` are None when the record type has no
    insertable or no updatable fields.
    """

    select: str
    select_by_id: str
    insert: Optional[str]
    update_by_id: Optional[str]
    delete_by_id: str
    columns: Tuple[str, ...]
    paramstyle: str = "qmark"

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            "select": self.select,
            "select_by_id": self.select_by_id,
            "insert": self.insert,
            "update_by_id": self.update_by_id,
            "delete_by_id": self.delete_by_id,
        }


def compile_statements(schema: RecordSchema, paramstyle: str = "qmark") -> CompiledStatements:
    """
    Compile the statement set for a record schema.

    Compilation is deterministic: the same schema and paramstyle always yield
    byte-identical statements.

    Args:
        schema: Resolved record schema
        paramstyle: PEP 249 placeholder style of the target driver

    Returns:
        CompiledStatements for the schema

    Example:
        >>> schema = resolve_schema("Record", RecordDef([
        ...     FieldDef("id", identity=True, auto_increment=True),
        ...     FieldDef("name"),
        ... ]), default_dialect="any")
        >>> compile_statements(schema).insert
        'INSERT INTO "records" ("name") VALUES (?)'
    """
    validate_paramstyle(paramstyle)

    dialect = schema.dialect
    table = schema.table_name
    id_column = schema.identity.name
    soft_delete_column = schema.soft_delete.name if schema.soft_delete else None

    select = build_select(dialect, table, schema.columns, soft_delete_column)
    select_by_id = build_select_by_id(
        dialect,
        table,
        schema.columns,
        id_column,
        placeholder(paramstyle, 1),
        soft_delete_column,
    )

    insert_columns = schema.insert_columns
    insert: Optional[str] = None
    if insert_columns:
        insert = build_insert(
            dialect,
            table,
            insert_columns,
            build_placeholders(paramstyle, len(insert_columns)),
        )

    update_columns = schema.update_columns
    update_by_id: Optional[str] = None
    if update_columns:
        update_by_id = build_update_by_id(
            dialect,
            table,
            update_columns,
            build_placeholders(paramstyle, len(update_columns)),
            id_column,
            # Identity is bound after every SET argument
            placeholder(paramstyle, len(update_columns) + 1),
            soft_delete_column,
        )

    if schema.soft_delete is not None:
        delete_by_id = build_soft_delete_by_id(
            dialect,
            table,
            schema.soft_delete.name,
            schema.soft_delete.deleted_with,
            id_column,
            placeholder(paramstyle, 1),
        )
    else:
        delete_by_id = build_delete_by_id(
            dialect, table, id_column, placeholder(paramstyle, 1)
        )

    return CompiledStatements(
        select=select,
        select_by_id=select_by_id,
        insert=insert,
        update_by_id=update_by_id,
        delete_by_id=delete_by_id,
        columns=schema.columns,
        paramstyle=paramstyle,
    )

"""
SqlCrud - schema-driven CRUD statements for record types.

A record type declares its fields once; the identity column, insert and
update field sets, soft-delete column and dialect quoting are resolved when
the type is defined, and the resulting SQL is reused by every operation.
"""

__version__ = "0.1.0"

from sql_crud.domain.record import CrudRecord
from sql_crud.infrastructure.schema import (
    ColumnType,
    FieldDef,
    RecordDef,
    RecordSchema,
    SchemaDefinitionError,
    timed_fields,
)
from sql_crud.infrastructure.sql import CompiledStatements, Dialect, compile_statements
from sql_crud.io.executor import (
    DataAccessError,
    ExecutionResult,
    Executor,
    RecordDecodeError,
    SqlAlchemyExecutor,
    create_executor,
)

__all__ = [
    "__version__",
    "CrudRecord",
    "ColumnType",
    "FieldDef",
    "RecordDef",
    "RecordSchema",
    "SchemaDefinitionError",
    "timed_fields",
    "CompiledStatements",
    "Dialect",
    "compile_statements",
    "DataAccessError",
    "ExecutionResult",
    "Executor",
    "RecordDecodeError",
    "SqlAlchemyExecutor",
    "create_executor",
]

"""
Record runtime: create, read, update and delete for declared record types.

A record type subclasses ``CrudRecord`` and lists its fields in
``__crud_fields__``. The schema is resolved, compiled and registered once,
when the class statement runs; declaration errors surface there as
``SchemaDefinitionError``. Every operation afterwards reuses the same
immutable statements.

Example:
    >>> @dataclass
    ... class Item(CrudRecord, dialect="mysql"):
    ...     __crud_fields__ = (
    ...         FieldDef("id", ColumnType.INTEGER, identity=True),
    ...         FieldDef("name"),
    ...         FieldDef("deleted_at", ColumnType.DATETIME,
    ...                  ignore_on_insert=True, ignore_on_update=True,
    ...                  deleted_with="NOW()"),
    ...     )
    ...     id: int
    ...     name: str
    ...     deleted_at: Optional[datetime] = None
    >>> Item.crud_statements().delete_by_id
    'UPDATE `items` SET `deleted_at` = NOW() WHERE `items`.`id` = ? AND `deleted_at` IS NULL'
"""

from typing import Any, Callable, ClassVar, List, Optional, Sequence, Type, TypeVar

from sql_crud.config import get_settings
from sql_crud.infrastructure.schema.core import FieldDef, RecordDef, RecordSchema
from sql_crud.infrastructure.schema.exceptions import (
    SchemaDefinitionError,
    UnsupportedOperationError,
)
from sql_crud.infrastructure.schema.registry import RegisteredRecord, register_record
from sql_crud.infrastructure.schema.resolver import resolve_schema
from sql_crud.infrastructure.sql.compiler import CompiledStatements, compile_statements
from sql_crud.infrastructure.sql.core.parameters import validate_paramstyle
from sql_crud.io.executor.base import ExecutionResult, Executor
from sql_crud.io.executor.exceptions import (
    DataAccessError,
    ParamstyleMismatchError,
    RecordBindError,
    RecordDecodeError,
)
from sql_crud.utils.logging import bind_context, get_logger

logger = get_logger(__name__)

R = TypeVar("R", bound="CrudRecord")


class CrudRecord:
    """Base class giving a record type its CRUD operations."""

    __crud_fields__: ClassVar[Sequence[FieldDef]]
    __crud__: ClassVar[RegisteredRecord]

    def __init_subclass__(
        cls,
        *,
        table_name: Optional[str] = None,
        dialect: Optional[str] = None,
        paramstyle: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        fields = cls.__dict__.get("__crud_fields__")
        if fields is None:
            # Intermediate base classes without their own fields are not tables
            return

        settings = get_settings()
        paramstyle = paramstyle or settings.paramstyle
        try:
            validate_paramstyle(paramstyle)
        except ValueError as e:
            raise SchemaDefinitionError(f"Record type '{cls.__name__}': {e}") from e

        schema = resolve_schema(
            cls.__name__,
            RecordDef(fields, table_name=table_name, dialect=dialect),
            default_dialect=settings.default_dialect,
        )
        statements = compile_statements(schema, paramstyle)
        cls.__crud__ = register_record(cls, schema, statements)

        logger.debug(
            "record.schema.compiled",
            record_type=cls.__qualname__,
            table=schema.table_name,
            dialect=schema.dialect.value,
            identity=schema.identity.name,
            insert_columns=list(schema.insert_columns),
            update_columns=list(schema.update_columns),
            soft_delete=schema.soft_delete.name if schema.soft_delete else None,
        )

    @classmethod
    def crud_schema(cls) -> RecordSchema:
        return cls._registered().schema

    @classmethod
    def crud_statements(cls) -> CompiledStatements:
        return cls._registered().statements

    @classmethod
    def _registered(cls) -> RegisteredRecord:
        entry = cls.__dict__.get("__crud__")
        if entry is None:
            raise TypeError(f"{cls.__qualname__} does not declare __crud_fields__")
        return entry

    # Argument binding. Both lists come from the same field tuples the
    # compiler emitted placeholders for.

    def _value(self, field: FieldDef, operation: str) -> Any:
        try:
            return getattr(self, field.name)
        except AttributeError as e:
            raise RecordBindError(
                f"{type(self).__qualname__} declares field '{field.name}' but the "
                "instance has no such attribute",
                operation=operation,
                original_error=e,
            ) from e

    def identity_value(self) -> Any:
        return self._value(self.crud_schema().identity, "bind")

    def insert_arguments(self) -> List[Any]:
        """Arguments for the insert statement, in insert-set order."""
        return [self._value(f, "create") for f in self.crud_schema().insert_fields]

    def update_arguments(self) -> List[Any]:
        """Arguments for the update statement: update set, then the identity value."""
        schema = self.crud_schema()
        arguments = [self._value(f, "update") for f in schema.update_fields]
        arguments.append(self._value(schema.identity, "update"))
        return arguments

    # Operations

    def create(self, executor: Executor) -> ExecutionResult:
        """
        Insert this record.

        A database-generated identity is not read back; fetch the row again
        if it is needed.

        Raises:
            UnsupportedOperationError: If the record type has no insertable fields
        """
        sql = self._statement("insert", "create")
        return self._execute(executor, "create", sql, self.insert_arguments())

    @classmethod
    def by_id(cls: Type[R], executor: Executor, identity: Any) -> Optional[R]:
        """
        Fetch one record by identity.

        Returns:
            The record, or None when no (non-deleted) row matches
        """
        sql = cls.crud_statements().select_by_id
        cls._check_paramstyle(executor, "by_id", sql)
        row = _call(executor.query_one, "by_id", sql, [identity])
        if row is None:
            return None
        return cls._from_row(row)

    @classmethod
    def all(cls: Type[R], executor: Executor) -> List[R]:
        """Fetch every (non-deleted) record of this type."""
        sql = cls.crud_statements().select
        cls._check_paramstyle(executor, "all", sql)
        rows = _call(executor.query_all, "all", sql, [])
        return [cls._from_row(row) for row in rows]

    def update(self, executor: Executor) -> ExecutionResult:
        """
        Update this record's row by identity.

        Zero rows affected means no row currently matched (wrong identity or
        already soft-deleted); it is not an error.

        Raises:
            UnsupportedOperationError: If the record type has no updatable fields
        """
        sql = self._statement("update_by_id", "update")
        return self._execute(executor, "update", sql, self.update_arguments())

    def delete(self, executor: Executor) -> ExecutionResult:
        """Delete (or soft-delete) this record's row by identity."""
        return type(self).delete_by_id(executor, self.identity_value())

    @classmethod
    def delete_by_id(cls, executor: Executor, identity: Any) -> ExecutionResult:
        """Delete (or soft-delete) the row with the given identity."""
        return cls._execute(
            executor, "delete", cls.crud_statements().delete_by_id, [identity]
        )

    @classmethod
    def _statement(cls, name: str, operation: str) -> str:
        sql = getattr(cls.crud_statements(), name)
        if sql is None:
            kind = "insertable" if name == "insert" else "updatable"
            raise UnsupportedOperationError(
                f"Record type '{cls.__qualname__}' has no {kind} fields; "
                f"{operation} is not available"
            )
        return sql

    @classmethod
    def _check_paramstyle(cls, executor: Executor, operation: str, sql: str) -> None:
        expected = getattr(executor, "paramstyle", None)
        compiled = cls.crud_statements().paramstyle
        if expected is not None and expected != compiled:
            raise ParamstyleMismatchError(
                f"{cls.__qualname__} statements use paramstyle '{compiled}' but the "
                f"executor binds '{expected}'; declare the record type with "
                f"paramstyle='{expected}' or set SQL_CRUD_PARAMSTYLE",
                operation=operation,
                sql=sql,
            )

    @classmethod
    def _execute(
        cls, executor: Executor, operation: str, sql: str, arguments: List[Any]
    ) -> ExecutionResult:
        cls._check_paramstyle(executor, operation, sql)
        result = _call(executor.execute, operation, sql, arguments)
        log = bind_context(record_type=cls.__qualname__, table=cls.crud_schema().table_name)
        log.debug(f"record.{operation}", rows_affected=result.rows_affected)
        return result

    @classmethod
    def _from_row(cls: Type[R], row: Sequence[Any]) -> R:
        columns = cls.crud_statements().columns
        if len(row) != len(columns):
            raise RecordDecodeError(
                f"{cls.__qualname__} expects {len(columns)} columns, row has {len(row)}",
                operation="decode",
            )
        try:
            return cls(**dict(zip(columns, row)))
        except TypeError as e:
            raise RecordDecodeError(
                f"Cannot build {cls.__qualname__} from row: {e}",
                operation="decode",
                original_error=e,
            ) from e


def _call(
    method: Callable[[str, List[Any]], Any],
    operation: str,
    sql: str,
    arguments: List[Any],
) -> Any:
    """Invoke an executor method, surfacing any failure as DataAccessError."""
    try:
        return method(sql, arguments)
    except DataAccessError:
        raise
    except Exception as e:
        raise DataAccessError(
            f"{operation} failed: {e}", operation=operation, sql=sql, original_error=e
        ) from e

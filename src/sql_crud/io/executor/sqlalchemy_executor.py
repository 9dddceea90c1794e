"""
SQLAlchemy-backed executor.

Runs compiled statements through ``exec_driver_sql`` so the statement text
reaches the DBAPI driver unchanged. The driver's paramstyle decides whether
ordered arguments are passed as a tuple or as a ``{"p1": ...}`` mapping, so
record types must be compiled with that same paramstyle; ``paramstyle`` is
exposed for record operations to check before they run.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence, Union

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, CursorResult, Engine
from sqlalchemy.exc import SQLAlchemyError

from sql_crud.config import Settings, get_settings
from sql_crud.infrastructure.sql.core.parameters import bind_arguments
from sql_crud.utils.logging import get_logger

from .base import ExecutionResult
from .exceptions import DataAccessError

logger = get_logger(__name__)


class SqlAlchemyExecutor:
    """
    Executor running statements on a SQLAlchemy Engine or Connection.

    With an Engine, every statement runs in its own transaction on a pooled
    connection. With a Connection, the caller owns the transaction lifecycle
    and must commit.

    Example:
        >>> from sqlalchemy import create_engine
        >>> executor = SqlAlchemyExecutor(create_engine("sqlite://"))
        >>> result = executor.execute("CREATE TABLE t (id INTEGER)", [])
    """

    def __init__(self, bind: Union[Engine, Connection]):
        self.bind = bind

    @property
    def paramstyle(self) -> str:
        """PEP 249 paramstyle of the underlying driver."""
        return self.bind.dialect.paramstyle

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        if isinstance(self.bind, Connection):
            yield self.bind
        else:
            with self.bind.begin() as conn:
                yield conn

    def _run(self, operation: str, sql: str, arguments: Sequence[Any], handle):
        parameters = bind_arguments(self.paramstyle, arguments)
        try:
            with self._connection() as conn:
                result: CursorResult = conn.exec_driver_sql(sql, parameters)
                return handle(result)
        except SQLAlchemyError as e:
            logger.error(
                "database.execute.failed",
                operation=operation,
                sql=sql,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DataAccessError(
                f"{operation} failed: {e}",
                operation=operation,
                sql=sql,
                original_error=e,
            ) from e

    def execute(self, sql: str, arguments: Sequence[Any]) -> ExecutionResult:
        """Execute a modifying statement and report the affected row count."""
        return self._run(
            "execute",
            sql,
            arguments,
            lambda result: ExecutionResult(rows_affected=result.rowcount),
        )

    def query_one(self, sql: str, arguments: Sequence[Any]) -> Optional[Sequence[Any]]:
        """Return the first row of a query as a tuple, or None when there is none."""

        def first(result: CursorResult) -> Optional[Sequence[Any]]:
            row = result.fetchone()
            return tuple(row) if row is not None else None

        return self._run("query_one", sql, arguments, first)

    def query_all(self, sql: str, arguments: Sequence[Any]) -> List[Sequence[Any]]:
        """Return every row of a query as tuples."""
        return self._run(
            "query_all",
            sql,
            arguments,
            lambda result: [tuple(row) for row in result.fetchall()],
        )


def create_executor(settings: Optional[Settings] = None) -> SqlAlchemyExecutor:
    """
    Build an executor from configuration.

    Args:
        settings: Settings to use (defaults to the cached process settings)

    Returns:
        SqlAlchemyExecutor over a pooled Engine
    """
    settings = settings or get_settings()
    url = settings.get_database_connection_string()
    engine_kwargs = {}
    if not url.startswith("sqlite"):
        engine_kwargs["pool_size"] = settings.db_pool_size
        engine_kwargs["pool_pre_ping"] = True
    engine = create_engine(url, **engine_kwargs)
    logger.info(
        "database.executor.initialized",
        driver=engine.dialect.name,
        paramstyle=engine.dialect.paramstyle,
        pool_size=engine_kwargs.get("pool_size"),
    )
    if engine.dialect.paramstyle != settings.paramstyle:
        logger.warning(
            "database.executor.paramstyle_mismatch",
            driver=engine.dialect.name,
            driver_paramstyle=engine.dialect.paramstyle,
            configured_paramstyle=settings.paramstyle,
        )
    return SqlAlchemyExecutor(engine)

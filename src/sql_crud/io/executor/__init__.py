"""Statement executors."""

from .base import ExecutionResult, Executor
from .exceptions import (
    DataAccessError,
    ParamstyleMismatchError,
    RecordBindError,
    RecordDecodeError,
)
from .sqlalchemy_executor import SqlAlchemyExecutor, create_executor

__all__ = [
    "ExecutionResult",
    "Executor",
    "DataAccessError",
    "RecordDecodeError",
    "RecordBindError",
    "ParamstyleMismatchError",
    "SqlAlchemyExecutor",
    "create_executor",
]

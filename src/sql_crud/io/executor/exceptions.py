"""Data-access exceptions raised by record operations.

Executor failures (connectivity loss, constraint violations, decode
mismatches) are surfaced as ``DataAccessError`` with the original driver
exception chained. Nothing here is retried.
"""

from typing import Dict, Optional


class DataAccessError(Exception):
    """Structured error for a failed statement execution."""

    def __init__(
        self,
        message: str,
        operation: str = "",
        sql: str = "",
        original_error: Optional[BaseException] = None,
    ):
        self.operation = operation
        self.sql = sql
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "operation": self.operation,
            "sql": self.sql,
            "message": str(self),
            "original_error_type": type(self.original_error).__name__
            if self.original_error is not None
            else "",
            "original_error_message": str(self.original_error)
            if self.original_error is not None
            else "",
        }


class RecordDecodeError(DataAccessError):
    """Raised when a fetched row does not match the record's columns."""


class RecordBindError(DataAccessError):
    """Raised when a record instance cannot supply a declared field's value."""


class ParamstyleMismatchError(DataAccessError):
    """Raised when statements were compiled for a different paramstyle than
    the executor's driver binds."""

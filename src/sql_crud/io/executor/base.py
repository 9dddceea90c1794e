"""
Executor interface consumed by record operations.

An executor runs SQL text with ordered arguments against a backing store.
Connection lifecycle, pooling and transactions belong to the executor, not to
the record runtime.

An executor may also expose a ``paramstyle`` attribute naming the PEP 249
placeholder style its driver binds. Record operations check it against the
style their statements were compiled with before running anything.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of a statement that modifies rows."""

    rows_affected: int


@runtime_checkable
class Executor(Protocol):
    """Protocol for statement executors."""

    def execute(self, sql: str, arguments: Sequence[Any]) -> ExecutionResult: ...

    def query_one(self, sql: str, arguments: Sequence[Any]) -> Optional[Sequence[Any]]: ...

    def query_all(self, sql: str, arguments: Sequence[Any]) -> List[Sequence[Any]]: ...

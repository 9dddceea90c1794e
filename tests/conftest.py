"""Pytest configuration and shared fixtures.

.sql_crud_env (if present) is loaded first with override=True so test runs
never pick up a developer's production database settings.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_TEST_ENV_FILE = Path(__file__).parent.parent / ".sql_crud_env"
if _TEST_ENV_FILE.exists():
    load_dotenv(_TEST_ENV_FILE, override=True)

from dataclasses import dataclass, field
from typing import Any, Generator, List, Optional, Sequence, Tuple

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from sql_crud.config import get_settings
from sql_crud.io.executor import ExecutionResult, SqlAlchemyExecutor


@dataclass
class RecordingExecutor:
    """Executor double that records every call and replays canned results."""

    rows_affected: int = 1
    paramstyle: Optional[str] = None
    row: Optional[Sequence[Any]] = None
    rows: List[Sequence[Any]] = field(default_factory=list)
    error: Optional[Exception] = None
    calls: List[Tuple[str, str, List[Any]]] = field(default_factory=list)

    def _record(self, method: str, sql: str, arguments: Sequence[Any]) -> None:
        self.calls.append((method, sql, list(arguments)))
        if self.error is not None:
            raise self.error

    def execute(self, sql: str, arguments: Sequence[Any]) -> ExecutionResult:
        self._record("execute", sql, arguments)
        return ExecutionResult(rows_affected=self.rows_affected)

    def query_one(self, sql: str, arguments: Sequence[Any]) -> Optional[Sequence[Any]]:
        self._record("query_one", sql, arguments)
        return self.row

    def query_all(self, sql: str, arguments: Sequence[Any]) -> List[Sequence[Any]]:
        self._record("query_all", sql, arguments)
        return list(self.rows)

    @property
    def last_call(self) -> Tuple[str, str, List[Any]]:
        return self.calls[-1]


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so monkeypatched environment variables take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine; every connection in the test shares one database."""
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_executor(sqlite_engine: Engine) -> SqlAlchemyExecutor:
    return SqlAlchemyExecutor(sqlite_engine)

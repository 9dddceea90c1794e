"""
Unit tests for the SQLAlchemy executor against in-memory SQLite.
"""

import json
import logging

import pytest
from sqlalchemy import create_engine

from sql_crud.config import Settings
from sql_crud.io.executor import (
    DataAccessError,
    ExecutionResult,
    Executor,
    SqlAlchemyExecutor,
    create_executor,
)


@pytest.fixture
def notes_executor(sqlite_executor):
    sqlite_executor.execute(
        "CREATE TABLE notes (id INTEGER PRIMARY KEY, body TEXT NOT NULL)", []
    )
    return sqlite_executor


@pytest.mark.unit
class TestSqlAlchemyExecutor:
    def test_satisfies_executor_protocol(self, sqlite_executor):
        assert isinstance(sqlite_executor, Executor)
        assert sqlite_executor.paramstyle == "qmark"

    def test_execute_reports_rows_affected(self, notes_executor):
        result = notes_executor.execute("INSERT INTO notes (id, body) VALUES (?, ?)", [1, "a"])
        assert result == ExecutionResult(rows_affected=1)

        result = notes_executor.execute("UPDATE notes SET body = ? WHERE id = ?", ["b", 2])
        assert result.rows_affected == 0

    def test_statements_commit_per_call(self, notes_executor):
        notes_executor.execute("INSERT INTO notes (id, body) VALUES (?, ?)", [1, "a"])
        assert notes_executor.query_one("SELECT id, body FROM notes WHERE id = ?", [1]) == (1, "a")

    def test_query_one_absent(self, notes_executor):
        assert notes_executor.query_one("SELECT id FROM notes WHERE id = ?", [9]) is None

    def test_query_all_returns_tuples(self, notes_executor):
        for note_id, body in [(1, "a"), (2, "b")]:
            notes_executor.execute("INSERT INTO notes (id, body) VALUES (?, ?)", [note_id, body])

        rows = notes_executor.query_all("SELECT id, body FROM notes ORDER BY id", [])
        assert rows == [(1, "a"), (2, "b")]

    def test_driver_errors_become_data_access_errors(self, notes_executor):
        with pytest.raises(DataAccessError) as excinfo:
            notes_executor.execute("INSERT INTO missing (id) VALUES (?)", [1])
        assert excinfo.value.operation == "execute"
        assert excinfo.value.sql == "INSERT INTO missing (id) VALUES (?)"
        assert excinfo.value.original_error is not None

    def test_constraint_violation(self, notes_executor):
        notes_executor.execute("INSERT INTO notes (id, body) VALUES (?, ?)", [1, "a"])
        with pytest.raises(DataAccessError, match="execute failed"):
            notes_executor.execute("INSERT INTO notes (id, body) VALUES (?, ?)", [1, "b"])

    def test_named_paramstyle_binds_mapping(self):
        engine = create_engine("sqlite://", paramstyle="named")
        try:
            executor = SqlAlchemyExecutor(engine)
            assert executor.paramstyle == "named"
            assert executor.query_one("SELECT :p1, :p2", ["a", 2]) == ("a", 2)
        finally:
            engine.dispose()

    def test_connection_bind_leaves_transaction_to_caller(self, sqlite_engine, notes_executor):
        with sqlite_engine.connect() as conn:
            executor = SqlAlchemyExecutor(conn)
            executor.execute("INSERT INTO notes (id, body) VALUES (?, ?)", [1, "a"])
            assert executor.query_one("SELECT body FROM notes WHERE id = ?", [1]) == ("a",)
            conn.rollback()

        assert notes_executor.query_one("SELECT body FROM notes WHERE id = ?", [1]) is None


@pytest.mark.unit
class TestDataAccessError:
    def test_to_dict(self):
        original = RuntimeError("boom")
        error = DataAccessError("create failed", operation="create", sql="INSERT", original_error=original)
        assert error.to_dict() == {
            "error_type": "DataAccessError",
            "operation": "create",
            "sql": "INSERT",
            "message": "create failed",
            "original_error_type": "RuntimeError",
            "original_error_message": "boom",
        }


@pytest.mark.unit
class TestCreateExecutor:
    def test_from_settings(self, monkeypatch):
        monkeypatch.delenv("SQL_CRUD_DATABASE_URI", raising=False)
        monkeypatch.delenv("SQL_CRUD_DATABASE__URI", raising=False)
        monkeypatch.setenv("SQL_CRUD_DATABASE_DRIVER", "sqlite")
        monkeypatch.setenv("SQL_CRUD_DATABASE_DB", "")

        executor = create_executor(Settings(_env_file=None))
        try:
            assert isinstance(executor, SqlAlchemyExecutor)
            assert executor.paramstyle == "qmark"
            assert executor.query_one("SELECT 1", []) == (1,)
        finally:
            executor.bind.dispose()

    def test_warns_when_configured_paramstyle_differs(self, monkeypatch, caplog):
        monkeypatch.delenv("SQL_CRUD_DATABASE_URI", raising=False)
        monkeypatch.setenv("SQL_CRUD_DATABASE_DRIVER", "sqlite")
        monkeypatch.setenv("SQL_CRUD_DATABASE_DB", "")
        monkeypatch.setenv("SQL_CRUD_PARAMSTYLE", "format")
        caplog.set_level(logging.WARNING, logger="sql_crud")

        executor = create_executor(Settings(_env_file=None))
        try:
            events = [
                json.loads(r.getMessage())
                for r in caplog.records
                if r.name.startswith("sql_crud")
            ]
            mismatch = [e for e in events if e["event"] == "database.executor.paramstyle_mismatch"]
            assert mismatch[0]["driver_paramstyle"] == "qmark"
            assert mismatch[0]["configured_paramstyle"] == "format"
        finally:
            executor.bind.dispose()

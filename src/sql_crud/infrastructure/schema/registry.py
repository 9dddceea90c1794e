"""Record schema registry.

Schemas and compiled statements are computed once per record type and cached
here, keyed by the record type itself. Entries are immutable and safe to read
from any thread once registered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from .core import RecordSchema

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from sql_crud.infrastructure.sql.compiler import CompiledStatements


@dataclass(frozen=True)
class RegisteredRecord:
    """Schema and compiled statements of one record type."""

    record_type: type
    schema: RecordSchema
    statements: "CompiledStatements"


_RECORD_REGISTRY: Dict[type, RegisteredRecord] = {}


def register_record(
    record_type: type, schema: RecordSchema, statements: "CompiledStatements"
) -> RegisteredRecord:
    """Register the compiled schema of a record type."""
    if record_type in _RECORD_REGISTRY:
        raise ValueError(
            f"Record type '{record_type.__qualname__}' is already registered. "
            "Unregister it first."
        )
    entry = RegisteredRecord(record_type=record_type, schema=schema, statements=statements)
    _RECORD_REGISTRY[record_type] = entry
    return entry


def unregister_record(record_type: type) -> None:
    """Remove a record type from the registry (no-op if absent)."""
    _RECORD_REGISTRY.pop(record_type, None)


def get_record(record_type: type) -> RegisteredRecord:
    """Retrieve the registered schema of a record type."""
    if record_type not in _RECORD_REGISTRY:
        available = list_records()
        raise KeyError(
            f"Record type '{record_type.__qualname__}' not found in registry. "
            f"Available: {available}"
        )
    return _RECORD_REGISTRY[record_type]


def list_records() -> List[str]:
    """List the qualified names of all registered record types."""
    return sorted(
        f"{t.__module__}:{t.__qualname__}" for t in _RECORD_REGISTRY
    )


__all__ = [
    "RegisteredRecord",
    "register_record",
    "unregister_record",
    "get_record",
    "list_records",
]

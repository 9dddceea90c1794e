"""
Inspect CLI for SqlCrud.

Prints the resolved schema and compiled statements of a record type, which
is the quickest way to review exactly what SQL a declaration produces.

Usage:
    python -m sql_crud.cli inspect myapp.models:Item
    python -m sql_crud.cli inspect myapp.models:Item --format json
"""

import argparse
import importlib
import json
import sys
from typing import Any, Dict, List, Optional

from sql_crud.infrastructure.schema.exceptions import SchemaDefinitionError
from sql_crud.infrastructure.schema.registry import get_record


def load_record_type(target: str) -> type:
    """
    Import a record type from a ``module:TypeName`` reference.

    Raises:
        ValueError: If the reference is malformed or does not name a class
    """
    module_name, sep, type_name = target.partition(":")
    if not sep or not module_name or not type_name:
        raise ValueError(f"Expected 'module:TypeName', got {target!r}")
    module = importlib.import_module(module_name)
    record_type = module
    for part in type_name.split("."):
        record_type = getattr(record_type, part)
    if not isinstance(record_type, type):
        raise ValueError(f"{target!r} is not a class")
    return record_type


def describe(record_type: type) -> Dict[str, Any]:
    """Build a JSON-serializable description of a registered record type."""
    entry = get_record(record_type)
    schema = entry.schema
    return {
        "record_type": f"{record_type.__module__}:{record_type.__qualname__}",
        "table": schema.table_name,
        "dialect": schema.dialect.value,
        "paramstyle": entry.statements.paramstyle,
        "identity": schema.identity.name,
        "auto_increment": schema.auto_increment,
        "soft_delete": schema.soft_delete.name if schema.soft_delete else None,
        "columns": [
            {"name": f.name, "type": f.column_type.value} for f in schema.fields
        ],
        "insert_columns": list(schema.insert_columns),
        "update_columns": list(schema.update_columns),
        "statements": entry.statements.as_dict(),
    }


def format_text(description: Dict[str, Any]) -> str:
    lines = [
        f"Record type: {description['record_type']}",
        f"Table:       {description['table']} ({description['dialect']}, "
        f"{description['paramstyle']})",
        f"Identity:    {description['identity']}"
        + (" (auto increment)" if description["auto_increment"] else ""),
        f"Soft delete: {description['soft_delete'] or '-'}",
        f"Insert set:  {', '.join(description['insert_columns'])}",
        f"Update set:  {', '.join(description['update_columns'])}",
        "",
    ]
    for name, sql in description["statements"].items():
        lines.append(f"{name}:")
        lines.append(f"  {sql or '-'}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point for record inspection.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = argparse.ArgumentParser(
        prog="sql_crud.cli inspect",
        description="Show the compiled SQL of a record type",
    )
    parser.add_argument("target", help="Record type as module:TypeName")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    args = parser.parse_args(argv)

    try:
        record_type = load_record_type(args.target)
        description = describe(record_type)
    except SchemaDefinitionError as e:
        print(f"Error: invalid record declaration: {e}", file=sys.stderr)
        return 1
    except (ImportError, AttributeError, ValueError, KeyError) as e:
        print(f"Error: cannot load {args.target}: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(description, indent=2, ensure_ascii=False))
    else:
        print(format_text(description))
    return 0


if __name__ == "__main__":
    sys.exit(main())

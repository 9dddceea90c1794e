"""
SQL identifier handling utilities.

Provides functions for quoting and qualifying SQL identifiers (table names,
column names) according to the target dialect.
"""

from typing import Union

from ..dialects.base import Dialect, parse_dialect

QUOTE_CHARACTERS = ('"', "`", "[", "]")


def quote_identifier(name: str, dialect: Union[str, Dialect] = Dialect.ANY) -> str:
    """
    Quote a SQL identifier (table or column name).

    MySQL quotes with backticks; every other dialect uses double quotes.
    Embedded quote characters are doubled, although record schemas reject such
    names before they reach this function.

    Args:
        name: The identifier to quote
        dialect: Dialect member or tag

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("record_id")
        '"record_id"'
        >>> quote_identifier("record_id", dialect="mysql")
        '`record_id`'
    """
    quote = parse_dialect(dialect).quote_char
    escaped = name.replace(quote, quote * 2)
    return f"{quote}{escaped}{quote}"


def qualify_column(
    table: str, column: str, dialect: Union[str, Dialect] = Dialect.ANY
) -> str:
    """
    Create a table-qualified column reference.

    Examples:
        >>> qualify_column("items", "id")
        '"items"."id"'
        >>> qualify_column("items", "id", dialect="mysql")
        '`items`.`id`'
    """
    return f"{quote_identifier(table, dialect)}.{quote_identifier(column, dialect)}"


def is_quotable(name: str) -> bool:
    """Return True when ``name`` can be quoted without escaping in any dialect."""
    if not name or name != name.strip():
        return False
    if any(ch in name for ch in QUOTE_CHARACTERS):
        return False
    return all(ch.isprintable() for ch in name)

"""
SQL dialect tags.

A dialect only decides how identifiers are quoted. Placeholder syntax is
chosen separately (see ``sql_crud.infrastructure.sql.core.parameters``).
"""

from enum import Enum
from typing import Union

from sql_crud.infrastructure.schema.exceptions import UnsupportedDialectError


class Dialect(str, Enum):
    """Supported SQL dialects."""

    ANY = "any"
    MSSQL = "mssql"
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite"

    @property
    def quote_char(self) -> str:
        """Character used to open and close a quoted identifier."""
        return "`" if self is Dialect.MYSQL else '"'


_ALIASES = {
    "generic": Dialect.ANY,
    "ansi": Dialect.ANY,
    "sqlserver": Dialect.MSSQL,
    "tsql": Dialect.MSSQL,
    "mariadb": Dialect.MYSQL,
    "postgresql": Dialect.POSTGRES,
    "pg": Dialect.POSTGRES,
}


def parse_dialect(value: Union[str, Dialect]) -> Dialect:
    """
    Resolve a dialect tag into a Dialect.

    Args:
        value: Dialect member or tag (case-insensitive, e.g. "MySql", "postgresql")

    Returns:
        The matching Dialect

    Raises:
        UnsupportedDialectError: If the tag is not recognised

    Examples:
        >>> parse_dialect("MySql")
        <Dialect.MYSQL: 'mysql'>
        >>> parse_dialect("postgresql")
        <Dialect.POSTGRES: 'postgres'>
    """
    if isinstance(value, Dialect):
        return value
    if not isinstance(value, str):
        raise UnsupportedDialectError(f"Dialect must be a string tag, got {value!r}")
    tag = value.strip().lower()
    try:
        return Dialect(tag)
    except ValueError:
        pass
    if tag in _ALIASES:
        return _ALIASES[tag]
    supported = [d.value for d in Dialect]
    raise UnsupportedDialectError(
        f"Unknown dialect '{value}'. Supported: {supported}"
    )

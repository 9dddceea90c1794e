"""Table naming convention for record types.

A record type named ``TimedField`` is backed by the table ``timed_fields``:
the type name is converted to snake_case and its last word is pluralized.
"""

import re

_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SIBILANT_SUFFIXES = ("s", "x", "z", "ch", "sh")
_VOWELS = "aeiou"


def to_snake_case(name: str) -> str:
    """
    Convert a CamelCase type name to snake_case.

    Examples:
        >>> to_snake_case("MoreFields")
        'more_fields'
        >>> to_snake_case("HTTPRequestLog")
        'http_request_log'
    """
    return _BOUNDARY.sub("_", name).replace("__", "_").lower()


def pluralize(word: str) -> str:
    """
    Pluralize a single lowercase English word with the regular rules.

    Examples:
        >>> pluralize("record")
        'records'
        >>> pluralize("category")
        'categories'
        >>> pluralize("box")
        'boxes'
    """
    if not word:
        return word
    if word.endswith(_SIBILANT_SUFFIXES):
        return f"{word}es"
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return f"{word[:-1]}ies"
    return f"{word}s"


def to_table_name(type_name: str) -> str:
    """
    Derive the default table name for a record type.

    Examples:
        >>> to_table_name("Record")
        'records'
        >>> to_table_name("TimedField")
        'timed_fields'
    """
    snake = to_snake_case(type_name)
    head, sep, last = snake.rpartition("_")
    return f"{head}{sep}{pluralize(last)}"

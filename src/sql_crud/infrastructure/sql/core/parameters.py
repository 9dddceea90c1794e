"""
SQL parameter placeholder utilities.

Compiled statements always bind arguments positionally. Drivers that expect a
numbered or named placeholder style get their placeholders rendered when the
statement is compiled, and ``bind_arguments`` turns the ordered argument list
into the matching parameter object when the statement runs.
"""

from typing import Any, Dict, List, Sequence, Tuple, Union

PARAMSTYLES = ("qmark", "format", "numeric", "named", "pyformat")

NAMED_PARAMSTYLES = ("named", "pyformat")


def validate_paramstyle(paramstyle: str) -> str:
    """Return ``paramstyle`` unchanged, raising ValueError if it is unknown."""
    if paramstyle not in PARAMSTYLES:
        raise ValueError(
            f"Unsupported paramstyle '{paramstyle}'. Supported: {list(PARAMSTYLES)}"
        )
    return paramstyle


def param_name(position: int) -> str:
    """Name of the parameter bound at 1-based ``position`` for named styles."""
    return f"p{position}"


def placeholder(paramstyle: str, position: int) -> str:
    """
    Render the placeholder for the argument at 1-based ``position``.

    Examples:
        >>> placeholder("qmark", 3)
        '?'
        >>> placeholder("numeric", 3)
        ':3'
        >>> placeholder("pyformat", 3)
        '%(p3)s'
    """
    if paramstyle == "qmark":
        return "?"
    if paramstyle == "format":
        return "%s"
    if paramstyle == "numeric":
        return f":{position}"
    if paramstyle == "named":
        return f":{param_name(position)}"
    if paramstyle == "pyformat":
        return f"%({param_name(position)})s"
    raise ValueError(f"Unsupported paramstyle '{paramstyle}'")


def build_placeholders(paramstyle: str, count: int, start: int = 1) -> List[str]:
    """
    Build ``count`` consecutive placeholders beginning at position ``start``.

    Examples:
        >>> build_placeholders("qmark", 2)
        ['?', '?']
        >>> build_placeholders("numeric", 2, start=3)
        [':3', ':4']
    """
    return [placeholder(paramstyle, position) for position in range(start, start + count)]


def bind_arguments(
    paramstyle: str, arguments: Sequence[Any]
) -> Union[Tuple[Any, ...], Dict[str, Any]]:
    """
    Convert ordered arguments into the parameter object a driver expects.

    Positional styles take a tuple; named styles take a mapping keyed by the
    same names ``placeholder`` rendered.

    Examples:
        >>> bind_arguments("qmark", ["a", 1])
        ('a', 1)
        >>> bind_arguments("named", ["a", 1])
        {'p1': 'a', 'p2': 1}
    """
    if paramstyle in NAMED_PARAMSTYLES:
        return {param_name(i): value for i, value in enumerate(arguments, start=1)}
    return tuple(arguments)

"""Core SQL utilities package."""

from .identifier import is_quotable, qualify_column, quote_identifier
from .parameters import (
    PARAMSTYLES,
    bind_arguments,
    build_placeholders,
    placeholder,
    validate_paramstyle,
)

__all__ = [
    "quote_identifier",
    "qualify_column",
    "is_quotable",
    "PARAMSTYLES",
    "placeholder",
    "build_placeholders",
    "bind_arguments",
    "validate_paramstyle",
]

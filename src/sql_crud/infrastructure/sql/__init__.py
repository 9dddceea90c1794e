"""
SQL module for record statement generation.

This module provides reusable utilities for building SQL statements with
dialect-correct identifier quoting and driver-specific placeholders.
"""

from .compiler import CompiledStatements, compile_statements
from .core.identifier import qualify_column, quote_identifier
from .core.parameters import bind_arguments, build_placeholders, placeholder
from .dialects.base import Dialect, parse_dialect

__all__ = [
    "quote_identifier",
    "qualify_column",
    "placeholder",
    "build_placeholders",
    "bind_arguments",
    "Dialect",
    "parse_dialect",
    "CompiledStatements",
    "compile_statements",
]

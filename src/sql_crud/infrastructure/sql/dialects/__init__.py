"""SQL dialect definitions."""

from .base import Dialect, parse_dialect

__all__ = ["Dialect", "parse_dialect"]

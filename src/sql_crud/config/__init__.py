"""Configuration management for SqlCrud.

Usage:
    >>> from sql_crud.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.default_dialect)
"""

from sql_crud.config.settings import DatabaseSettings, Settings, get_settings

__all__ = [
    "DatabaseSettings",
    "Settings",
    "get_settings",
]

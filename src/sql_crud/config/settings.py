"""
Configuration management for SqlCrud.

This module provides environment-based configuration using Pydantic BaseSettings.
Values are read from environment variables with the SQL_CRUD_ prefix and from an
optional .env file at the project root (override the path with SQL_CRUD_ENV_FILE).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SQL_CRUD_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

DEFAULT_PORTS = {
    "mysql": 3306,
    "postgresql": 5432,
    "mssql": 1433,
}


class DatabaseSettings:
    """
    Connection parameters for the backing store.

    Supports both component-based and URI-based connection string generation.
    """

    def __init__(
        self,
        driver: str,
        host: str,
        port: Optional[int] = None,
        user: str = "",
        password: str = "",
        db: str = "",
        uri: Optional[str] = None,
    ):
        self.driver = driver
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.uri = uri

    def get_connection_string(self) -> str:
        """
        Get a SQLAlchemy connection string.

        Returns:
            Database connection string (DSN)
        """
        if self.uri:
            return self.uri
        if self.driver.startswith("sqlite"):
            # Empty database name means an in-memory database
            return f"{self.driver}:///{self.db}" if self.db else f"{self.driver}://"
        backend = self.driver.split("+", 1)[0]
        port = self.port or DEFAULT_PORTS.get(backend)
        netloc = self.host if port is None else f"{self.host}:{port}"
        return f"{self.driver}://{self.user}:{self.password}@{netloc}/{self.db}"


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Environment variables are loaded with the SQL_CRUD_ prefix. For example,
    SQL_CRUD_DEFAULT_DIALECT=mysql makes record types without an explicit
    dialect quote identifiers with backticks.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("SQL_CRUD_LOG_LEVEL", "LOG_LEVEL"),
        description="Logging level (uppercase)",
    )

    # Statement compilation defaults
    default_dialect: Literal["any", "mssql", "mysql", "postgres", "sqlite"] = Field(
        default="sqlite",
        description="Dialect used by record types that do not select one explicitly",
    )
    paramstyle: Literal["qmark", "format", "numeric", "named", "pyformat"] = Field(
        default="qmark",
        description="PEP 249 placeholder style emitted into compiled statements",
    )

    # Database configuration
    database_driver: str = Field(
        default="sqlite", description="SQLAlchemy driver name, e.g. mysql+pymysql"
    )
    database_host: str = Field(default="127.0.0.1", description="Database host")
    database_port: Optional[int] = Field(default=None, description="Database port")
    database_user: str = Field(default="root", description="Database user")
    database_password: str = Field(default="", description="Database password")
    database_db: str = Field(default="", description="Database name")
    database_uri: Optional[str] = Field(
        default=None,
        description="Complete database URI (overrides the individual components)",
        validation_alias=AliasChoices("SQL_CRUD_DATABASE__URI", "SQL_CRUD_DATABASE_URI"),
    )
    db_pool_size: int = Field(default=5, description="Database connection pool size")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def database(self) -> DatabaseSettings:
        """Database settings assembled from the individual configuration fields."""
        return DatabaseSettings(
            driver=self.database_driver,
            host=self.database_host,
            port=self.database_port,
            user=self.database_user,
            password=self.database_password,
            db=self.database_db,
            uri=self.database_uri,
        )

    def get_database_connection_string(self) -> str:
        """
        Get the connection string for the configured backing store.

        Automatically corrects the 'postgres://' scheme to 'postgresql://' for
        SQLAlchemy compatibility.
        """
        final_uri = self.database.get_connection_string()
        if final_uri.startswith("postgres://"):
            final_uri = final_uri.replace("postgres://", "postgresql://", 1)
        return final_uri

    model_config = SettingsConfigDict(
        env_prefix="SQL_CRUD_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused across the process, so record types
    compiled at import time all see the same defaults.
    """
    return Settings()

"""Public port exports for concrete adapter implementations."""

from .db_api import (
    AnsiDialect,
    DataSource,
    Dialect,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    data_source_from_url,
)

__all__ = [
    "DataSource",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "AnsiDialect",
    "data_source_from_url",
]

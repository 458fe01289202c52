"""DB-API data source and dialect exports."""

from .data_source import Connection, DataSource, RowCursor, Statement
from .dialects import AnsiDialect, Dialect, MySQLDialect, PostgresDialect, SQLiteDialect
from .urls import data_source_from_url

__all__ = [
    "AnsiDialect",
    "Connection",
    "DataSource",
    "Dialect",
    "MySQLDialect",
    "PostgresDialect",
    "RowCursor",
    "SQLiteDialect",
    "Statement",
    "data_source_from_url",
]

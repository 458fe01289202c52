"""Fluent SQL queries, updates, and batches over DB-API data sources."""

import logging

from .core import (
    POSITIONAL,
    SQL,
    Batch,
    BatchExecutionError,
    BindingError,
    CallbackSubscriber,
    ColumnTypeError,
    ConfigurationError,
    Direction,
    ExecutionError,
    FluentSQLError,
    OrderBy,
    Query,
    Result,
    ResultStream,
    Subscriber,
    UnknownColumnError,
    Update,
    asc,
    desc,
    named,
    positional,
)
from .ports import (
    AnsiDialect,
    DataSource,
    Dialect,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    data_source_from_url,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "SQL",
    "Query",
    "Update",
    "Batch",
    "Result",
    "ResultStream",
    "Subscriber",
    "CallbackSubscriber",
    "OrderBy",
    "Direction",
    "asc",
    "desc",
    "POSITIONAL",
    "positional",
    "named",
    "DataSource",
    "Dialect",
    "SQLiteDialect",
    "MySQLDialect",
    "PostgresDialect",
    "AnsiDialect",
    "data_source_from_url",
    "FluentSQLError",
    "ConfigurationError",
    "BindingError",
    "UnknownColumnError",
    "ColumnTypeError",
    "ExecutionError",
    "BatchExecutionError",
]

"""Exception hierarchy shared by the core and the DB-API port."""

from __future__ import annotations

import contextlib
from typing import Any, Iterator


class FluentSQLError(Exception):
    """Base class for every error raised by fluent-sql."""


class ConfigurationError(FluentSQLError, ValueError):
    """Raised when a query, update, or parameter set is configured incorrectly."""


class BindingError(FluentSQLError):
    """Raised when a parameter or result value cannot be resolved."""


class UnknownColumnError(BindingError, KeyError):
    """Raised when a result is accessed with an unknown name or ordinal."""

    def __init__(self, key: Any, message: str):
        super().__init__(message)
        self.key = key
        self.message = message

    def __str__(self) -> str:
        return self.message


class ColumnTypeError(BindingError, TypeError):
    """Raised when a result value does not match the requested type."""


class ExecutionError(FluentSQLError):
    """Raised when acquiring, preparing, executing, or fetching fails."""


class BatchExecutionError(ExecutionError):
    """Raised when one statement of a batch fails.

    Attributes:
        index: Zero-based position of the failing statement.
        sql: Text of the failing statement.
        count: Rows affected by the statements executed before the failure.
    """

    def __init__(self, message: str, *, index: int, sql: str, count: int):
        super().__init__(message)
        self.index = index
        self.sql = sql
        self.count = count


@contextlib.contextmanager
def driver_errors(action: str) -> Iterator[None]:
    """Translate driver exceptions raised in the block into `ExecutionError`.

    Library errors pass through unchanged.
    """

    try:
        yield
    except FluentSQLError:
        raise
    except Exception as exc:
        raise ExecutionError(f"{action} failed: {exc}") from exc

"""Core port contracts implemented by database adapters."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Protocol

from .types import ColumnDescription


class DialectPort(Protocol):
    """Database-specific SQL rendering used by statement composition."""

    name: str
    paramstyle: str

    def limit_clause(self, offset: int, count: int) -> str: ...

    def render_markers(self, sql: str) -> str: ...

    def apply_timeout(self, conn: Any, seconds: int) -> None: ...


class RowCursorPort(Protocol):
    """Cursor returned by `StatementPort.execute_query`."""

    description: ColumnDescription

    def fetchone(self) -> Any: ...

    def close(self) -> None: ...


class StatementPort(Protocol):
    """Prepared statement with 1-based positional binding."""

    sql: str

    def set_timeout(self, seconds: int) -> None: ...

    def bind(self, position: int, value: Any) -> None: ...

    def execute_query(self) -> RowCursorPort: ...

    def execute_update(self) -> int: ...


class ConnectionPort(Protocol):
    """Connection checked out from a data source."""

    def prepare(self, sql: str) -> StatementPort: ...

    def execute_literal(self, sql: str) -> int: ...


class DataSourcePort(Protocol):
    """Data source able to hand out scoped connections concurrently."""

    dialect: DialectPort

    def connection(self) -> AbstractContextManager[ConnectionPort]: ...

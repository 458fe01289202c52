"""DB-API data source implementing the core data source port."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Callable, Iterator, Optional

from ...core.errors import BindingError, ConfigurationError
from .dialects import Dialect

logger = logging.getLogger(__name__)


class DataSource:
    """Opens one DB-API connection per checkout.

    Args:
        connect: DB-API `connect` callable (for example `sqlite3.connect`).
        *connect_args: Positional arguments for `connect`.
        dialect: Concrete SQL dialect instance. Defaults to `Dialect()`.
        autocommit: Commit after every update statement. When `False` the
            connection is committed when its scope exits cleanly and rolled
            back otherwise.
        **connect_kwargs: Keyword arguments for `connect`.
    """

    def __init__(
        self,
        connect: Callable[..., Any],
        *connect_args: Any,
        dialect: Optional[Dialect] = None,
        autocommit: bool = True,
        **connect_kwargs: Any,
    ):
        self._connect = connect
        self._connect_args = connect_args
        self._connect_kwargs = connect_kwargs
        self.dialect = dialect if dialect is not None else Dialect()
        self.autocommit = autocommit

    @contextlib.contextmanager
    def connection(self) -> Iterator[Connection]:
        """Check out a connection and close it when the block exits."""

        raw = self._connect(*self._connect_args, **self._connect_kwargs)
        conn = Connection(raw, self.dialect, autocommit=self.autocommit)
        try:
            yield conn
        except BaseException:
            if not self.autocommit:
                conn.rollback()
            raise
        else:
            if not self.autocommit:
                conn.commit()
        finally:
            conn.close()


class Connection:
    """Connection wrapper handing out prepared statements."""

    def __init__(self, raw: Any, dialect: Dialect, *, autocommit: bool = True):
        self.raw = raw
        self.dialect = dialect
        self.autocommit = autocommit

    def prepare(self, sql: str) -> Statement:
        """Prepare `sql` (with `?` markers) for binding and execution."""

        return Statement(self, sql)

    def execute_literal(self, sql: str) -> int:
        """Execute self-contained SQL as written and return the affected-row count.

        No parameters are sent and no marker conversion happens, so literal
        `?` and `%` characters reach the driver unchanged.
        """

        logger.debug("%s", sql)
        cur = self.raw.cursor()
        try:
            cur.execute(sql)
        except BaseException:
            _close_cursor(cur)
            raise
        return _finish_update(self, cur)

    def commit(self) -> None:
        self.raw.commit()

    def rollback(self) -> None:
        rollback = getattr(self.raw, "rollback", None)
        if callable(rollback):
            rollback()

    def close(self) -> None:
        close = getattr(self.raw, "close", None)
        if callable(close):
            close()


class Statement:
    """Prepared statement collecting values by 1-based position."""

    def __init__(self, connection: Connection, sql: str):
        self.connection = connection
        self.sql = sql
        self.timeout = 0
        self._bound: dict[int, Any] = {}

    def set_timeout(self, seconds: int) -> None:
        if seconds < 0:
            raise ConfigurationError(f"Query timeout must be >= 0, got {seconds}.")
        self.timeout = int(seconds)

    def bind(self, position: int, value: Any) -> None:
        if position < 1:
            raise BindingError(f"Parameter positions start at 1, got {position}.")
        self._bound[position] = value

    def parameters(self) -> tuple[Any, ...]:
        """Return bound values in position order.

        Raises:
            BindingError: When a position below the highest bound one has no
                value.
        """

        if not self._bound:
            return ()
        highest = max(self._bound)
        missing = [pos for pos in range(1, highest + 1) if pos not in self._bound]
        if missing:
            raise BindingError(f"No value specified for parameter {missing[0]}.")
        return tuple(self._bound[pos] for pos in range(1, highest + 1))

    def _execute(self) -> Any:
        params = self.parameters()
        conn = self.connection
        sql = conn.dialect.render_markers(self.sql)
        if self.timeout:
            conn.dialect.apply_timeout(conn.raw, self.timeout)
        logger.debug("%s %r", sql, params)
        cur = conn.raw.cursor()
        try:
            cur.execute(sql, params)
        except BaseException:
            _close_cursor(cur)
            raise
        return cur

    def execute_query(self) -> RowCursor:
        """Execute and return a cursor to fetch rows from."""

        cur = self._execute()
        conn = self.connection
        return RowCursor(cur, conn.dialect, conn.raw, self.timeout)

    def execute_update(self) -> int:
        """Execute and return the affected-row count."""

        return _finish_update(self.connection, self._execute())


class RowCursor:
    """DB-API cursor whose statement timeout covers each fetch separately.

    Time the caller spends between fetches is not charged to the statement.
    """

    def __init__(self, cursor: Any, dialect: Dialect, raw: Any, timeout: int):
        self.cursor = cursor
        self._dialect = dialect
        self._raw = raw
        self._timeout = timeout

    @property
    def description(self) -> Any:
        return self.cursor.description

    def fetchone(self) -> Any:
        if self._timeout:
            self._dialect.refresh_timeout(self._raw, self._timeout)
        return self.cursor.fetchone()

    def close(self) -> None:
        _close_cursor(self.cursor)


def _close_cursor(cur: Any) -> None:
    close = getattr(cur, "close", None)
    if callable(close):
        close()


def _finish_update(connection: Connection, cur: Any) -> int:
    try:
        count = getattr(cur, "rowcount", -1)
    finally:
        _close_cursor(cur)
    if connection.autocommit:
        connection.commit()
    return max(int(count if count is not None else -1), 0)

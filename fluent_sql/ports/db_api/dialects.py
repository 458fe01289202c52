"""Concrete SQL dialect implementations for DB-API adapters."""

from __future__ import annotations

import time
from typing import Any

from ...core.errors import ConfigurationError


class Dialect:
    """Base dialect: `?` markers, MySQL-style `LIMIT offset,count`, no timeouts."""

    name: str = "generic"
    paramstyle: str = "qmark"

    def limit_clause(self, offset: int, count: int) -> str:
        """Return the pagination clause for one window."""

        return f"LIMIT {offset},{count}"

    def render_markers(self, sql: str) -> str:
        """Convert `?` markers into the driver's parameter style.

        `format` drivers get `%s` markers and doubled literal `%` signs.
        """

        if self.paramstyle == "qmark":
            return sql
        if self.paramstyle == "format":
            return sql.replace("%", "%%").replace("?", "%s")
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def apply_timeout(self, conn: Any, seconds: int) -> None:
        """Limit how long statements on `conn` may run (`0` = no limit)."""

        if seconds:
            raise ConfigurationError(
                f"Dialect {self.name!r} does not support statement timeouts."
            )

    def refresh_timeout(self, conn: Any, seconds: int) -> None:
        """Restart a client-side deadline before the next fetch.

        Server-side limits only cover execution, so the default does nothing.
        """

    def _session_execute(self, conn: Any, sql: str) -> None:
        cur = conn.cursor()
        try:
            cur.execute(sql)
        finally:
            close = getattr(cur, "close", None)
            if callable(close):
                close()


class SQLiteDialect(Dialect):
    """SQLite dialect (`?` parameters, progress-handler timeouts)."""

    name = "sqlite"
    paramstyle = "qmark"

    def apply_timeout(self, conn: Any, seconds: int) -> None:
        if not seconds:
            conn.set_progress_handler(None, 0)
            return
        deadline = time.monotonic() + seconds

        def _expired() -> int:
            return 1 if time.monotonic() >= deadline else 0

        # Non-zero return aborts the running statement with "interrupted".
        conn.set_progress_handler(_expired, 1000)

    def refresh_timeout(self, conn: Any, seconds: int) -> None:
        self.apply_timeout(conn, seconds)


class MySQLDialect(Dialect):
    """MySQL dialect (`%s` positional parameters, `max_execution_time`)."""

    name = "mysql"
    paramstyle = "format"

    def apply_timeout(self, conn: Any, seconds: int) -> None:
        if not seconds:
            return
        self._session_execute(conn, f"SET SESSION max_execution_time = {int(seconds) * 1000}")


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%s` parameters, `LIMIT count OFFSET offset`)."""

    name = "postgres"
    paramstyle = "format"

    def limit_clause(self, offset: int, count: int) -> str:
        return f"LIMIT {count} OFFSET {offset}"

    def apply_timeout(self, conn: Any, seconds: int) -> None:
        if not seconds:
            return
        self._session_execute(conn, f"SET statement_timeout = {int(seconds) * 1000}")


class AnsiDialect(Dialect):
    """SQL:2008 pagination (`OFFSET ... ROWS FETCH NEXT ... ROWS ONLY`)."""

    name = "ansi"

    def limit_clause(self, offset: int, count: int) -> str:
        return f"OFFSET {offset} ROWS FETCH NEXT {count} ROWS ONLY"

"""Windowed SELECT execution over a data source."""

from __future__ import annotations

import logging
from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generator, Mapping, Optional, Sequence, Tuple, Union

from .conditions import OrderBy
from .contracts import DataSourcePort
from .errors import ConfigurationError, driver_errors
from .parameters import bind, coerce
from .query_builder import prepare_select
from .result import Result, materialize_row
from .stream import ResultStream
from .types import ParameterSet, Window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryPlan:
    """Snapshot of a query's configuration taken by `Query.execute()`."""

    sql: str
    window: Window
    all_rows: bool
    order_by: Tuple[OrderBy, ...]
    parameters: Mapping[Any, Any]
    timeout: int


class Query:
    """Fluent SELECT builder.

    A query is configured through chained calls and run by `execute()`::

        stream = (
            sql.query("SELECT first, last FROM person WHERE title = :title")
            .parameters(title="Cat")
            .order_by(desc("first"))
            .limit(0, 10)
            .all_rows()
            .execute()
        )

    By default only the first matching row is fetched. With `all_rows()`
    the query is re-issued window by window until a page comes back short.
    `execute()` never modifies the configuration, so the same query can be
    executed repeatedly or concurrently.
    """

    def __init__(self, sql: str, data_source: DataSourcePort):
        self.sql = sql
        self.data_source = data_source
        self._all_rows = False
        self._window: Window = (0, 1)
        self._order_by: Tuple[OrderBy, ...] = ()
        self._parameters: ParameterSet = {}
        self._timeout = 0

    def all_rows(self, all_rows: bool = True) -> Query:
        """Fetch every matching row, windowed by `limit()`."""

        self._all_rows = bool(all_rows)
        return self

    def limit(
        self, offset: Union[int, Sequence[int]], count: Optional[int] = None
    ) -> Query:
        """Set the starting offset and the maximum rows per window.

        Accepts `limit(offset, count)` or `limit((offset, count))`.
        """

        if count is None:
            if not isinstance(offset, SequenceABC) or len(offset) != 2:
                raise ConfigurationError("limit() expects (offset, count).")
            offset, count = offset
        if isinstance(offset, SequenceABC):
            raise ConfigurationError("limit() expects (offset, count).")
        if offset < 0:
            raise ConfigurationError(f"Window offset must be >= 0, got {offset}.")
        if count < 1:
            raise ConfigurationError(f"Window count must be >= 1, got {count}.")
        self._window = (int(offset), int(count))
        return self

    def order_by(self, *order_by: OrderBy) -> Query:
        """Replace the ordering of the results."""

        self._order_by = tuple(order_by)
        return self

    def parameters(self, *values: Any, **named_values: Any) -> Query:
        """Set positional (`?`) or named (`:name`) parameter values.

        `parameters("Lucky", 3)` binds by position, `parameters(title="Cat")`
        or `parameters({"title": "Cat"})` binds by name. A `Result` from
        another query can be passed directly to bind its columns by name.
        """

        self._parameters = coerce(values, named_values)
        return self

    def query_timeout(self, seconds: int) -> Query:
        """Cancel statements running longer than `seconds` (0 = no limit)."""

        if seconds < 0:
            raise ConfigurationError(f"Query timeout must be >= 0, got {seconds}.")
        self._timeout = int(seconds)
        return self

    def plan(self) -> QueryPlan:
        """Return an immutable snapshot of the current configuration."""

        return QueryPlan(
            sql=self.sql,
            window=self._window,
            all_rows=self._all_rows,
            order_by=self._order_by,
            parameters=MappingProxyType(dict(self._parameters)),
            timeout=self._timeout,
        )

    def execute(self) -> ResultStream:
        """Return a stream of results for the current configuration."""

        plan = self.plan()
        return ResultStream(lambda: self._produce(plan))

    def _produce(self, plan: QueryPlan) -> Generator[Result, None, None]:
        offset, count = plan.window
        dialect = self.data_source.dialect
        while True:
            fetched = 0
            logger.debug("fetching window offset=%d count=%d", offset, count)
            with driver_errors("query"):
                with self.data_source.connection() as conn:
                    text = prepare_select(plan.sql, plan.order_by, (offset, count), dialect)
                    stmt = conn.prepare(text.sql)
                    stmt.set_timeout(plan.timeout)
                    bind(stmt, plan.parameters, text.ordinals)
                    cursor = stmt.execute_query()
                    try:
                        while True:
                            row = cursor.fetchone()
                            if row is None:
                                break
                            fetched += 1
                            yield materialize_row(cursor.description, row)
                    finally:
                        cursor.close()

            if not plan.all_rows:
                return
            if fetched < count:
                logger.debug("window at offset %d returned %d rows; last page", offset, fetched)
                return
            offset += count

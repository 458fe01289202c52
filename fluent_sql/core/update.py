"""Single-shot DELETE/INSERT/UPDATE execution."""

from __future__ import annotations

import logging
from typing import Any

from .contracts import DataSourcePort
from .errors import ConfigurationError, driver_errors
from .parameters import bind, coerce
from .query_builder import prepare_update
from .types import ParameterSet

logger = logging.getLogger(__name__)


class Update:
    """Fluent DML builder; `execute()` returns the affected-row count.

    Like `Query`, an update can be executed any number of times; execution
    reads the configuration without modifying it.
    """

    def __init__(self, sql: str, data_source: DataSourcePort):
        self.sql = sql
        self.data_source = data_source
        self._parameters: ParameterSet = {}
        self._timeout = 0

    def parameters(self, *values: Any, **named_values: Any) -> Update:
        """Set positional (`?`) or named (`:name`) parameter values."""

        self._parameters = coerce(values, named_values)
        return self

    def query_timeout(self, seconds: int) -> Update:
        if seconds < 0:
            raise ConfigurationError(f"Query timeout must be >= 0, got {seconds}.")
        self._timeout = int(seconds)
        return self

    def execute(self) -> int:
        """Run the statement once.

        Raises:
            ExecutionError: When the driver fails to prepare or execute.
            BindingError: When a parameter position is left unbound.
        """

        parameters = dict(self._parameters)
        text = prepare_update(self.sql)
        with driver_errors("update"):
            with self.data_source.connection() as conn:
                stmt = conn.prepare(text.sql)
                stmt.set_timeout(self._timeout)
                bind(stmt, parameters, text.ordinals)
                count = stmt.execute_update()
        logger.debug("update affected %d rows", count)
        return count

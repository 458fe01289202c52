"""Sequential execution of literal SQL statements on one connection."""

from __future__ import annotations

import logging
from typing import Sequence

from .contracts import DataSourcePort
from .errors import BatchExecutionError, FluentSQLError, driver_errors

logger = logging.getLogger(__name__)


class Batch:
    """Ordered list of self-contained SQL statements.

    Statements carry no parameters. They run in order on one connection and
    the first failure aborts the rest. Statements that already ran are not
    rolled back here; the data source's commit mode decides their fate.
    """

    def __init__(self, statements: Sequence[str], data_source: DataSourcePort):
        self.statements = tuple(statements)
        self.data_source = data_source

    def __len__(self) -> int:
        return len(self.statements)

    def execute(self) -> int:
        """Run every statement and return the summed affected-row count.

        Raises:
            BatchExecutionError: When a statement fails; carries its index
                and the count accumulated before it.
            ExecutionError: When no connection can be acquired.
        """

        count = 0
        with driver_errors("batch"):
            with self.data_source.connection() as conn:
                for index, sql in enumerate(self.statements):
                    try:
                        count += conn.execute_literal(sql)
                    except FluentSQLError:
                        raise
                    except Exception as exc:
                        raise BatchExecutionError(
                            f"batch statement {index + 1} of {len(self.statements)} "
                            f"failed: {exc}",
                            index=index,
                            sql=sql,
                            count=count,
                        ) from exc
        logger.debug("batch of %d statements affected %d rows", len(self.statements), count)
        return count

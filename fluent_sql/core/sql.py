"""Entry point that creates queries, updates, and batches for a data source."""

from __future__ import annotations

import os
from typing import Iterable, TextIO, Union

from .batch import Batch
from .contracts import DataSourcePort
from .query import Query
from .update import Update


class SQL:
    """Factory for SQL operations bound to one data source."""

    def __init__(self, data_source: DataSourcePort):
        self.data_source = data_source

    def query(self, sql: str) -> Query:
        """Create a `Query` from a SELECT statement."""

        return Query(sql, self.data_source)

    def update(self, sql: str) -> Update:
        """Create an `Update` from a DELETE/INSERT/UPDATE statement."""

        return Update(sql, self.data_source)

    def batch(self, statements: Iterable[str]) -> Batch:
        """Create a `Batch` from a sequence of SQL statements."""

        return Batch(list(statements), self.data_source)

    def batch_from(self, source: Union[TextIO, str, "os.PathLike[str]"]) -> Batch:
        """Create a `Batch` with one statement per non-blank line.

        Args:
            source: Open text stream, or a path to a UTF-8 SQL file.
        """

        if isinstance(source, (str, os.PathLike)):
            with open(source, encoding="utf-8") as handle:
                return self.batch(_statement_lines(handle))
        return self.batch(_statement_lines(source))


def _statement_lines(lines: Iterable[str]) -> list[str]:
    return [line.rstrip("\r\n") for line in lines if line.strip()]

"""SQL composition for windowed SELECT statements.

This module appends ordering and pagination clauses to a base SELECT and
runs the result through placeholder rewriting. Pagination syntax comes from
the dialect, so the query engine never renders `LIMIT` itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .conditions import OrderBy
from .contracts import DialectPort
from .parameters import rewrite
from .types import OrdinalMap, Window


@dataclass(frozen=True)
class PreparedText:
    """SQL text ready for preparation with its placeholder ordinals."""

    sql: str
    ordinals: OrdinalMap


def compile_order_by(order_by: Optional[Sequence[OrderBy]]) -> str:
    """Compile `ORDER BY` clause from ordering inputs.

    Args:
        order_by: Ordering expressions or `None`.

    Returns:
        SQL `ORDER BY` fragment or an empty string.
    """

    if not order_by:
        return ""
    return f" ORDER BY {OrderBy.join(order_by)}"


def compose_select(
    sql: str,
    order_by: Optional[Sequence[OrderBy]],
    window: Window,
    dialect: DialectPort,
) -> str:
    """Append ordering and the window's pagination clause to `sql`.

    Args:
        sql: Base SELECT statement.
        order_by: Ordering expressions, rendered before pagination.
        window: `(offset, count)` of the page to fetch.
        dialect: Dialect that renders the pagination clause.

    Returns:
        Composed SQL text, placeholders untouched.
    """

    offset, count = window
    return f"{sql}{compile_order_by(order_by)} {dialect.limit_clause(offset, count)}"


def prepare_select(
    sql: str,
    order_by: Optional[Sequence[OrderBy]],
    window: Window,
    dialect: DialectPort,
) -> PreparedText:
    """Compose a windowed SELECT and rewrite its named placeholders."""

    text, ordinals = rewrite(compose_select(sql, order_by, window, dialect))
    return PreparedText(text, ordinals)


def prepare_update(sql: str) -> PreparedText:
    """Rewrite the named placeholders of a DML statement."""

    text, ordinals = rewrite(sql)
    return PreparedText(text, ordinals)

"""Ordering primitives for query result sorting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Direction(str, Enum):
    """Sort direction of one ordering expression."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class OrderBy:
    """Represents one ordering expression.

    Attributes:
        col: Column identifier, rendered verbatim.
        direction: Sort direction.
    """

    col: str
    direction: Direction = Direction.ASC

    @property
    def ascending(self) -> bool:
        return self.direction is Direction.ASC

    def __str__(self) -> str:
        return f"{self.col} {self.direction.value}"

    @staticmethod
    def join(order_by: Sequence[OrderBy]) -> str:
        """Render ordering expressions separated by commas."""

        return ", ".join(str(item) for item in order_by)


def asc(col: str) -> OrderBy:
    """Build `col ASC` ordering."""

    return OrderBy(col, Direction.ASC)


def desc(col: str) -> OrderBy:
    """Build `col DESC` ordering."""

    return OrderBy(col, Direction.DESC)

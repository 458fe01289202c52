"""Read-only row records produced by queries and reused as parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, NamedTuple, Optional, Type, TypeVar, Union

from .errors import ColumnTypeError, UnknownColumnError
from .types import ColumnDescription

X = TypeVar("X")

ColumnKey = Union[str, int]


class Element(NamedTuple):
    """Name and runtime type of one result value (`None` type for NULL)."""

    alias: str
    value_type: Optional[type]


class Result(Mapping[str, Any]):
    """One row as an ordered `name -> value` mapping with stable ordinals.

    Ordinals are assigned at construction: the 1-based position of each
    name in iteration order. A `Result` never changes after construction;
    `with_changes()` returns a derived copy that overlays pending changes.

    Item access accepts either a column name or an ordinal::

        row["title"]
        row[1]
    """

    __slots__ = ("_values", "_changes", "_names")

    def __init__(
        self,
        values: Optional[Mapping[str, Any]] = None,
        changes: Optional[Mapping[str, Any]] = None,
    ):
        base = dict(values or {})
        overlay = dict(changes or {})
        names = list(base)
        names.extend(name for name in overlay if name not in base)
        self._values = base
        self._changes = overlay
        self._names = tuple(names)

    def ordinal(self, name: str) -> int:
        """Return the 1-based ordinal of a column name."""

        if not self.has(name):
            raise UnknownColumnError(name, f"Unknown name [{name}]")
        return self._names.index(name) + 1

    def name_at(self, ordinal: int) -> str:
        """Return the column name at a 1-based ordinal."""

        if isinstance(ordinal, bool) or not 1 <= ordinal <= len(self._names):
            raise UnknownColumnError(ordinal, f"Ordinal out-of-range [{ordinal}]")
        return self._names[ordinal - 1]

    def has(self, name: str) -> bool:
        """Return whether a value exists for `name`."""

        return name in self._changes or name in self._values

    def value(self, key: ColumnKey) -> Any:
        """Return a value by name or ordinal."""

        name = self.name_at(key) if isinstance(key, int) else key
        if name in self._changes:
            return self._changes[name]
        if name in self._values:
            return self._values[name]
        raise UnknownColumnError(name, f"Unknown name [{name}]")

    def typed(self, key: ColumnKey, type_: Type[X]) -> Optional[X]:
        """Return a value by name or ordinal, checking its type.

        `None` passes the check for every type.

        Raises:
            ColumnTypeError: When the value is not an instance of `type_`.
        """

        value = self.value(key)
        if value is not None and not isinstance(value, type_):
            label = "Ordinal" if isinstance(key, int) else "Name"
            raise ColumnTypeError(f"{label} [{key}] incompatible with [{type_.__name__}]")
        return value

    def elements(self) -> list[Element]:
        """Return each column name with the runtime type of its value."""

        return [
            Element(name, None if value is None else type(value))
            for name, value in self.items()
        ]

    def to_dict(self) -> dict[str, Any]:
        """Export all columns as a plain `name -> value` dict."""

        return {name: self.value(name) for name in self._names}

    def to_tuple(self) -> tuple[Any, ...]:
        """Return the values in ordinal order."""

        return tuple(self.value(name) for name in self._names)

    @property
    def changes(self) -> dict[str, Any]:
        """Pending changes overlaid on the original values."""

        return dict(self._changes)

    def with_changes(self, changes: Mapping[str, Any]) -> Result:
        """Return a copy overlaying `changes` on top of this result."""

        merged = dict(self._changes)
        merged.update(changes)
        return Result(self._values, merged)

    def __getitem__(self, key: ColumnKey) -> Any:
        return self.value(key)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            return list(self.items()) == list(other.items())
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Result({self.to_dict()!r})"


def column_names(description: ColumnDescription) -> list[str]:
    """Extract column labels from a DB-API `cursor.description`."""

    if not description:
        raise TypeError("Cursor has no description; cannot map rows to results.")
    return [str(column[0]) for column in description]


def materialize_row(description: ColumnDescription, row: Any) -> Result:
    """Convert one fetched row into a `Result`.

    Mapping rows (dict cursors) and rows exposing `keys()` (`sqlite3.Row`)
    keep their own labels. Sequence rows are zipped with the labels of
    `description`. When a label repeats, the first position keeps the
    ordinal and the last value wins.
    """

    if isinstance(row, Mapping):
        return Result(row)

    if isinstance(row, (tuple, list)):
        return Result(dict(zip(column_names(description), row)))

    keys = getattr(row, "keys", None)
    if callable(keys):
        return Result({name: row[name] for name in keys()})

    raise TypeError(f"Unsupported row type: {type(row)}")

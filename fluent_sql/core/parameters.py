"""Named placeholder rewriting and parameter binding.

SQL handed to `Query` and `Update` may use `:name` placeholders or plain `?`
markers. Before preparation every `:name` token is replaced by `?` and its
position is recorded in an ordinal map, so both shapes end up bound by
1-based position on the prepared statement.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from .contracts import StatementPort
from .errors import ConfigurationError
from .types import OrdinalMap, ParameterSet


class _PositionalKey:
    """Sentinel key marking a parameter set as positional."""

    def __repr__(self) -> str:
        return "POSITIONAL"

    def __reduce__(self) -> str:
        return "POSITIONAL"


POSITIONAL = _PositionalKey()

_NAMED_PLACEHOLDER = re.compile(r":(\S+)")


def rewrite(sql: str) -> Tuple[str, OrdinalMap]:
    """Replace `:name` placeholders with `?` and record their positions.

    A placeholder is a colon followed by one or more non-whitespace
    characters. When a name occurs more than once every occurrence is
    rewritten, but the ordinal map only keeps the last position.

    Args:
        sql: SQL text that may contain named placeholders.

    Returns:
        The rewritten SQL and a `name -> 1-based position` map.
    """

    ordinals: OrdinalMap = {}
    position = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal position
        position += 1
        ordinals[match.group(1)] = position
        return "?"

    return _NAMED_PLACEHOLDER.sub(_replace, sql), ordinals


def is_positional(parameters: ParameterSet) -> bool:
    """Return whether the parameter set carries positional values."""

    return POSITIONAL in parameters


def positional(*values: Any) -> dict[Any, Any]:
    """Build a positional parameter set."""

    return {POSITIONAL: tuple(values)}


def named(mapping: Optional[Mapping[str, Any]] = None, **values: Any) -> dict[str, Any]:
    """Build a named parameter set from a mapping and/or keyword values."""

    merged: dict[str, Any] = dict(mapping or {})
    merged.update(values)
    if POSITIONAL in merged:
        raise ConfigurationError("Named parameters cannot contain the POSITIONAL key.")
    return merged


def bind(statement: StatementPort, parameters: ParameterSet, ordinals: OrdinalMap) -> None:
    """Bind a parameter set into a prepared statement.

    Positional sets bind their values at positions `1..N` and ignore the
    ordinal map. Named sets bind every name of the ordinal map at its recorded
    position; names missing from the set bind as `None`.

    Raises:
        ConfigurationError: When positional and named values are mixed.
    """

    if is_positional(parameters):
        if len(parameters) > 1:
            raise ConfigurationError(
                "Positional and named parameters cannot be mixed in one statement."
            )
        for index, value in enumerate(parameters[POSITIONAL], start=1):
            statement.bind(index, value)
        return

    for name, ordinal in ordinals.items():
        statement.bind(ordinal, parameters.get(name))


def coerce(values: Tuple[Any, ...], named_values: Mapping[str, Any]) -> dict[Any, Any]:
    """Normalize the arguments of a fluent `parameters(...)` call.

    A single mapping argument (a plain mapping, a `Result`, or a set built by
    `positional()`) is copied as a parameter set. Keyword arguments form a
    named set. Any other positional arguments form a positional set.
    """

    if values and named_values:
        raise ConfigurationError(
            "Use either positional or named parameters, not both."
        )
    if named_values:
        return named(named_values)
    if len(values) == 1 and isinstance(values[0], Mapping):
        params = dict(values[0])
        if POSITIONAL in params:
            if len(params) > 1:
                raise ConfigurationError(
                    "Positional and named parameters cannot be mixed in one statement."
                )
            params[POSITIONAL] = tuple(params[POSITIONAL])
        return params
    return positional(*values)

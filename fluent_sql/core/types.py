"""Shared core type aliases used across contracts, builders, and ports."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

ParameterSet = Mapping[Any, Any]
NamedParams = Dict[str, Any]
PositionalValues = Sequence[Any]
OrdinalMap = Dict[str, int]

Window = Tuple[int, int]
ColumnDescription = Optional[Sequence[Sequence[Any]]]

"""Public core API for query building, binding, and execution."""

from .batch import Batch
from .conditions import Direction, OrderBy, asc, desc
from .errors import (
    BatchExecutionError,
    BindingError,
    ColumnTypeError,
    ConfigurationError,
    ExecutionError,
    FluentSQLError,
    UnknownColumnError,
)
from .parameters import POSITIONAL, bind, named, positional, rewrite
from .query import Query, QueryPlan
from .query_builder import PreparedText, compose_select, prepare_select
from .result import Element, Result, materialize_row
from .sql import SQL
from .stream import CallbackSubscriber, ResultStream, Subscriber
from .update import Update

__all__ = [
    "SQL",
    "Query",
    "QueryPlan",
    "Update",
    "Batch",
    "Result",
    "Element",
    "ResultStream",
    "Subscriber",
    "CallbackSubscriber",
    "OrderBy",
    "Direction",
    "asc",
    "desc",
    "POSITIONAL",
    "positional",
    "named",
    "rewrite",
    "bind",
    "PreparedText",
    "compose_select",
    "prepare_select",
    "materialize_row",
    "FluentSQLError",
    "ConfigurationError",
    "BindingError",
    "UnknownColumnError",
    "ColumnTypeError",
    "ExecutionError",
    "BatchExecutionError",
]

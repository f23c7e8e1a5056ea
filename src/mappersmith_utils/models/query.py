"""Tagged variant for query-string value trees.

Native Python values are converted once, up front, into one of four node
types. The serializer then dispatches on node type instead of inspecting the
shape of arbitrary objects while it walks.

    None                   -> QueryNull
    Mapping                -> QueryMapping   (insertion order kept)
    list / tuple           -> QuerySequence  (index order kept)
    anything else          -> QueryScalar

Cycles are not detected; a self-referencing structure recurses until Python's
recursion limit is hit.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union

__all__ = [
    "QueryNull",
    "QueryScalar",
    "QuerySequence",
    "QueryMapping",
    "QueryValue",
    "to_query_value",
]


@dataclass(frozen=True)
class QueryNull:
    """A null leaf. Serializes to nothing."""


@dataclass(frozen=True)
class QueryScalar:
    """A leaf holding a number, boolean, string or other opaque value."""

    value: Any


@dataclass(frozen=True)
class QuerySequence:
    items: Tuple["QueryValue", ...]


@dataclass(frozen=True)
class QueryMapping:
    # (key, node) pairs in insertion order
    entries: Tuple[Tuple[str, "QueryValue"], ...]


QueryValue = Union[QueryNull, QueryScalar, QuerySequence, QueryMapping]

_NULL = QueryNull()


def to_query_value(value: Any) -> QueryValue:
    """Build a `QueryValue` tree from a native Python value.

    Mapping keys are converted with ``str()`` so integer keys behave like the
    string keys of a JSON object.
    """
    if value is None:
        return _NULL
    if isinstance(value, Mapping):
        return QueryMapping(
            tuple((str(k), to_query_value(v)) for k, v in value.items())
        )
    if isinstance(value, (list, tuple)):
        return QuerySequence(tuple(to_query_value(v) for v in value))
    return QueryScalar(value)

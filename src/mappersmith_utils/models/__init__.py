"""Typed value models used by the serializers."""
from __future__ import annotations

from .query import (
    QueryMapping,
    QueryNull,
    QueryScalar,
    QuerySequence,
    QueryValue,
    to_query_value,
)

__all__ = [
    "QueryMapping",
    "QueryNull",
    "QueryScalar",
    "QuerySequence",
    "QueryValue",
    "to_query_value",
]

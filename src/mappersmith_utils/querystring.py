"""Recursive query-string serialization with bracket notation.

Turns request parameters of arbitrary depth into the
``key=value&key2=value2`` form used in URLs and form bodies.

Key paths:
    {"a": {"b": 1}}              -> a[b]=1
    {"a": [1, 2]}                -> a[]=1&a[]=2
    {"a": [1, [2, [3, 4]]]}      -> a[]=1&a[][]=2&a[][][]=3&a[][][]=4
    {"a": [{"b": 1}]}            -> a[b][]=1

(Brackets are shown decoded; in the output they are percent-encoded.)

Encoding:
    Keys and values go through the ``encodeURIComponent`` unreserved set
    (letters, digits and ``-_.!~*'()``), then every ``%20`` becomes ``+``.
    Leaf values are stringified with `to_js_string`, so ``True`` serializes
    as ``true``.

Omission:
    ``None`` entries are dropped at every level; no key, ``=`` or ``&`` is
    emitted for them. Empty containers contribute nothing.

Pass-through:
    Anything that is not a mapping or a list/tuple is returned unchanged, so
    the same call serializes a whole parameter set or leaves a scalar alone.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Tuple
from urllib.parse import quote

from .coercion import to_js_string
from .models.query import (
    QueryMapping,
    QueryScalar,
    QuerySequence,
    QueryValue,
    to_query_value,
)

__all__ = ["to_query_string", "encode_component"]

# Characters encodeURIComponent leaves untouched besides ASCII alphanumerics
_UNRESERVED = "-_.!~*'()"


def encode_component(text: str) -> str:
    """Percent-encode ``text`` for a query string, using ``+`` for spaces."""
    return quote(text, safe=_UNRESERVED).replace("%20", "+")


def to_query_string(entry: Any) -> Any:
    """Serialize ``entry`` into a query string.

    Args:
        entry: Mapping or list/tuple of parameters (any depth). Other values
            are returned as-is.

    Returns:
        The encoded query string without a leading ``?`` (``""`` for an empty
        mapping), or ``entry`` itself when it is not a container.
    """
    if not isinstance(entry, (Mapping, list, tuple)):
        return entry
    tree = to_query_value(entry)
    pairs: List[str] = []
    for key, node in _top_level_entries(tree):
        _collect(key, node, "", pairs)
    return "&".join(pairs)


def _top_level_entries(tree: QueryValue) -> Iterable[Tuple[str, QueryValue]]:
    if isinstance(tree, QuerySequence):
        # a bare sequence is keyed by index, like the keys of a JS array
        return ((str(i), node) for i, node in enumerate(tree.items))
    if isinstance(tree, QueryMapping):
        return tree.entries
    return ()


def _collect(key: str, node: QueryValue, suffix: str, out: List[str]) -> None:
    """Append the encoded ``name=value`` pairs of ``node`` to ``out``.

    ``suffix`` accumulates one ``[]`` per enclosing sequence and is always
    placed after any mapping keys, so sequence markers trail the full path.
    """
    if isinstance(node, QueryScalar):
        out.append(
            encode_component(key + suffix) + "=" + encode_component(to_js_string(node.value))
        )
    elif isinstance(node, QuerySequence):
        for item in node.items:
            _collect(key, item, suffix + "[]", out)
    elif isinstance(node, QueryMapping):
        for child_key, child in node.entries:
            _collect(f"{key}[{child_key}]", child, suffix, out)
    # QueryNull: omitted entirely

"""Small mapping helpers used when assembling requests and responses.

Both helpers return NEW dicts and never mutate their argument, so callers can
hand in a user's params or headers without defensive copies.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

__all__ = ["lower_case_object_keys", "null_safe_object"]


def lower_case_object_keys(obj: Mapping[Any, Any]) -> Dict[Any, Any]:
    """Return a copy of ``obj`` with every top-level string key lowercased.

    Non-string keys are copied as-is. When two keys collide after lowercasing
    (``"ETag"`` and ``"etag"``) the later one wins.
    """
    return {
        (key.lower() if isinstance(key, str) else key): value
        for key, value in obj.items()
    }


def null_safe_object(obj: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    """Return a copy of ``obj`` without ``None`` values.

    ``None`` input yields an empty dict. Key casing and order are preserved.
    """
    if obj is None:
        return {}
    return {key: value for key, value in obj.items() if value is not None}

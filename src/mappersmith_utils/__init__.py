"""Pure data-transformation helpers for an HTTP client.

Having this file allows relative imports (e.g. `from .models import ...`) to
resolve under tooling (mypy/ruff) and exposes the public API:

    >>> from mappersmith_utils import to_query_string, btoa
    >>> to_query_string({"a": "some big string"})
    'a=some+big+string'
    >>> btoa("foo")
    'Zm9v'
"""
from __future__ import annotations

from .clock import FixedClock, ManualClock, WallClock, performance_now
from .coercion import is_plain_object, to_js_string
from .errors import DecodingError, EncodingError, MappersmithError
from .headers import parse_response_headers
from .latin1_base64 import atob, btoa
from .objects import lower_case_object_keys, null_safe_object
from .querystring import to_query_string

__version__ = "0.1.0"

__all__ = [
    "to_query_string",
    "parse_response_headers",
    "btoa",
    "atob",
    "lower_case_object_keys",
    "null_safe_object",
    "is_plain_object",
    "to_js_string",
    "performance_now",
    "WallClock",
    "FixedClock",
    "ManualClock",
    "MappersmithError",
    "EncodingError",
    "DecodingError",
]

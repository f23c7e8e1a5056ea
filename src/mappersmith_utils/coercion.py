"""Explicit value-to-string coercion and plain-object detection.

The query-string serializer and the Base64 codec both need to turn arbitrary
Python values into text the way an HTTP client written for browsers would:
``True`` becomes ``"true"``, ``1.0`` becomes ``"1"`` and a bare record becomes
``"[object Object]"``. This module makes that conversion a single total
function so every caller stringifies values identically.

Conversion table for `to_js_string`:
    None                      -> "null"
    bool                      -> "true" / "false"
    int                       -> decimal digits
    float                     -> shortest round-trip digits, integral values
                                 without ".0", exponent form outside
                                 1e-7 < |x| < 1e21, "NaN", "Infinity"
    str                       -> unchanged
    bytes / bytearray         -> Latin1 decoded (one char per byte)
    list / tuple              -> items coerced and joined with ","
                                 (None items become "")
    dict and objects without
    their own __str__         -> "[object Object]"
    anything else             -> str(value)

Public Functions:
    to_js_string: Total conversion of any value to its string form
    is_plain_object: True only for literal dict records
"""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

__all__ = ["OBJECT_TAG", "to_js_string", "is_plain_object"]

OBJECT_TAG = "[object Object]"


def is_plain_object(value: Any) -> bool:
    """Return True only for plain ``dict`` records.

    Subclasses of dict (``OrderedDict``, ``defaultdict``), instances of custom
    classes, sequences and primitives all return False.
    """
    return type(value) is dict


def to_js_string(value: Any) -> str:
    """Coerce ``value`` to its canonical string representation.

    See the module docstring for the full conversion table. The function
    never raises for well-behaved objects; a custom ``__str__`` that raises
    propagates its own exception.
    """
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_js_string(item) for item in value)
    if isinstance(value, dict) or type(value).__str__ is object.__str__:
        return OBJECT_TAG
    return str(value)


def _format_float(value: float) -> str:
    """Format a float using the ECMAScript Number-to-String rules."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # repr() yields the shortest digit string that round-trips
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent = int(exponent) + (len(digit_tuple) - len(digits))
    k = len(digits)
    n = k + exponent
    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + digits
    e = n - 1
    exp_part = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return sign + digits + exp_part
    return sign + digits[0] + "." + digits[1:] + exp_part

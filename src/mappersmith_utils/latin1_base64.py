"""Latin1-restricted Base64 codec (``btoa`` / ``atob``).

Mirrors the browser ``btoa`` contract: input is treated as a string of
single-byte characters (code points 0-255) and encoded with the standard
alphabet and ``=`` padding. Any character above U+00FF is rejected before a
single output character is produced; the codec never transcodes to UTF-8.

Encoding:
    Every 3 input bytes form a 24-bit group that is split into four 6-bit
    indexes into ``A-Z a-z 0-9 + /``. A trailing single byte emits two
    characters plus ``==``; two trailing bytes emit three characters plus ``=``.

Decoding (`atob`):
    ASCII whitespace is ignored, padding is optional, any other character
    outside the alphabet (or a length that leaves one dangling character)
    raises `DecodingError`. The result is a Latin1 string, one character per
    decoded byte.

Public Functions:
    btoa: Encode any value (coerced with `to_js_string`) to Base64
    atob: Decode Base64 text back to a Latin1 string
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from .coercion import to_js_string
from .errors import DecodingError, EncodingError

logger = logging.getLogger(__name__)

__all__ = ["ALPHABET", "btoa", "atob"]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="

_LATIN1_MAX = 0xFF
_DECODE_TABLE: Dict[str, int] = {ch: idx for idx, ch in enumerate(ALPHABET)}
_ASCII_WHITESPACE = " \t\n\f\r"

_LATIN1_REASON = (
    "The string to be encoded contains characters outside of the Latin1 range."
)
_MALFORMED_REASON = "The string to be decoded is not correctly encoded."


def btoa(value: Any) -> str:
    """Encode ``value`` as standard Base64.

    Non-string input is coerced first (``42`` -> ``"42"``, ``None`` ->
    ``"null"``, ``{"x": 1}`` -> ``"[object Object]"``).

    Raises:
        EncodingError: the coerced text contains a character outside Latin1.
    """
    text = to_js_string(value)
    for ch in text:
        if ord(ch) > _LATIN1_MAX:
            logger.debug("btoa rejected U+%04X", ord(ch))
            raise EncodingError("btoa", _LATIN1_REASON)

    out: List[str] = []
    full = len(text) - len(text) % 3
    for i in range(0, full, 3):
        group = (ord(text[i]) << 16) | (ord(text[i + 1]) << 8) | ord(text[i + 2])
        out.append(ALPHABET[(group >> 18) & 0x3F])
        out.append(ALPHABET[(group >> 12) & 0x3F])
        out.append(ALPHABET[(group >> 6) & 0x3F])
        out.append(ALPHABET[group & 0x3F])

    remaining = len(text) - full
    if remaining == 1:
        group = ord(text[full]) << 16
        out.append(ALPHABET[(group >> 18) & 0x3F])
        out.append(ALPHABET[(group >> 12) & 0x3F])
        out.append(PAD * 2)
    elif remaining == 2:
        group = (ord(text[full]) << 16) | (ord(text[full + 1]) << 8)
        out.append(ALPHABET[(group >> 18) & 0x3F])
        out.append(ALPHABET[(group >> 12) & 0x3F])
        out.append(ALPHABET[(group >> 6) & 0x3F])
        out.append(PAD)
    return "".join(out)


def atob(text: Any) -> str:
    """Decode Base64 ``text`` to a Latin1 string.

    Raises:
        DecodingError: the text is not well-formed Base64.
    """
    data = "".join(ch for ch in to_js_string(text) if ch not in _ASCII_WHITESPACE)
    if len(data) % 4 == 0 and data.endswith(PAD):
        data = data[:-2] if data.endswith(PAD * 2) else data[:-1]
    if len(data) % 4 == 1:
        raise DecodingError("atob", _MALFORMED_REASON)

    out: List[str] = []
    bits = 0
    bit_count = 0
    for ch in data:
        idx = _DECODE_TABLE.get(ch)
        if idx is None:
            raise DecodingError("atob", _MALFORMED_REASON)
        bits = (bits << 6) | idx
        bit_count += 6
        if bit_count >= 8:
            bit_count -= 8
            out.append(chr((bits >> bit_count) & 0xFF))
            bits &= (1 << bit_count) - 1
    return "".join(out)

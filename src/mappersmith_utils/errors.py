"""Exception hierarchy for the mappersmith utilities.

Every error raised on purpose by this package derives from `MappersmithError`
so callers can catch the whole family in one clause. Messages follow the
fixed format ``[Mappersmith] '<operation>' failed: <reason>`` which lets
callers tell which helper rejected the input without parsing tracebacks.

Exceptions:
    MappersmithError: Base class carrying the failing operation name
    EncodingError: `btoa` received a character outside the Latin1 range
    DecodingError: `atob` received text that is not valid Base64

Not errors (by policy):
    - Header lines without a colon are skipped by the header parser
    - Scalars handed to the query-string serializer are returned unchanged
"""
from __future__ import annotations

__all__ = ["MappersmithError", "EncodingError", "DecodingError"]


class MappersmithError(Exception):
    """Base class for all errors raised by mappersmith_utils.

    The `.operation` attribute names the helper that failed (e.g. ``"btoa"``).
    """

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"[Mappersmith] '{operation}' failed: {reason}")
        self.operation = operation
        self.reason = reason


class EncodingError(MappersmithError):
    """Raised when input cannot be Base64 encoded as Latin1 bytes."""


class DecodingError(MappersmithError):
    """Raised when input is not well-formed Base64."""

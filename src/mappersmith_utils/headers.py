"""Parsing of raw HTTP response header blocks.

Transports such as XMLHttpRequest hand back response headers as one string:

    X-RateLimit-Remaining: 57\r\n
    ETag: W/"679e71e24e6d901f5b36a55c5d80a32d"\r\n
    Last-Modified: Mon, 09 Nov 2015 19:06:15 GMT

`parse_response_headers` turns that into ``{"x-ratelimit-remaining": "57",
"etag": 'W/"679e..."', "last-modified": "Mon, 09 Nov 2015 19:06:15 GMT"}``.

Rules:
    - Lines split on CRLF or bare LF; blank lines dropped
    - Name/value split on the FIRST colon only (values keep their colons)
    - Name lowercased and trimmed; value trimmed, case preserved
    - ``Name:`` yields an empty-string value
    - Lines without a colon or with an empty name are skipped, not errors
    - Repeated names: the last line wins
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

__all__ = ["parse_response_headers"]


def parse_response_headers(raw_text: Optional[str]) -> Dict[str, str]:
    """Parse a raw header block into a lowercased-name -> value dict.

    Args:
        raw_text: Header block text (CRLF or LF delimited). ``None`` or an
            empty string produce an empty dict.

    Returns:
        Mapping of normalized header names to trimmed values.
    """
    headers: Dict[str, str] = {}
    if not raw_text:
        return headers
    # splitlines() would also break on \x0b, \x1c etc. which may appear in values
    for line in raw_text.replace("\r\n", "\n").split("\n"):
        if not line.strip():
            continue
        name, sep, value = line.partition(":")
        name = name.strip().lower()
        if not sep or not name:
            logger.debug("Skipping malformed header line: %r", line[:80])
            continue
        headers[name] = value.strip()
    return headers

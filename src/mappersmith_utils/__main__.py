"""Command-line front end for the mappersmith utilities.

This module provides a command-line interface using Typer so the helpers can
be exercised from a shell or a script:

    echo '{"a": [1, 2]}' | python -m mappersmith_utils qs
    python -m mappersmith_utils headers --file response_headers.txt
    python -m mappersmith_utils btoa 'user:secret'
    python -m mappersmith_utils atob 'dXNlcjpzZWNyZXQ='
    CLOCK=fixed FIXED_CLOCK_AT=2017-08-08T20:57:00Z python -m mappersmith_utils now

Library errors are reported on stderr as ``mappersmith: error: <message>``
with exit code 2.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from .clock import epoch_ms_to_dt, performance_now
from .config import build_clock, get_settings
from .errors import MappersmithError
from .headers import parse_response_headers
from .latin1_base64 import atob, btoa
from .querystring import to_query_string

app = typer.Typer(help="Query-string, header and Base64 helpers for HTTP clients")

logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    typer.echo(f"mappersmith: error: {message}", err=True)
    raise typer.Exit(code=2)


def _read_text(value: Optional[str]) -> str:
    """Return ``value`` or, when omitted, everything on stdin."""
    if value is not None:
        return value
    return sys.stdin.read()


@app.callback()
def main() -> None:
    """Load `.env` and configure logging before any subcommand runs."""
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)
    get_settings.cache_clear()
    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(f"invalid configuration: {e.errors()[0]['msg']}")
        return
    logging.basicConfig(level=settings.LOG_LEVEL)
    if env_file:
        logger.debug("Loaded environment from %s", env_file)


@app.command(help="Serialize a JSON document (argument or stdin) into a query string.")
def qs(
    document: Optional[str] = typer.Argument(None, help="JSON text; read from stdin when omitted"),
) -> None:
    try:
        params: Any = json.loads(_read_text(document))
    except json.JSONDecodeError as e:
        _fail(f"invalid JSON: {e}")
        return
    typer.echo(to_query_string(params))


@app.command(help="Parse a raw header block into a JSON object.")
def headers(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read headers from FILE instead of stdin"),
) -> None:
    raw = file.read_text(encoding="latin-1") if file else sys.stdin.read()
    typer.echo(json.dumps(parse_response_headers(raw), indent=2))


@app.command("btoa", help="Base64 encode Latin1 text.")
def btoa_command(text: str = typer.Argument(..., help="Text to encode")) -> None:
    try:
        typer.echo(btoa(text))
    except MappersmithError as e:
        _fail(str(e))


@app.command("atob", help="Decode Base64 text.")
def atob_command(text: str = typer.Argument(..., help="Base64 text to decode")) -> None:
    try:
        typer.echo(atob(text))
    except MappersmithError as e:
        _fail(str(e))


@app.command(help="Print the current timestamp of the configured clock.")
def now(
    iso: bool = typer.Option(False, "--iso/--ms", help="Print an ISO-8601 UTC timestamp instead of milliseconds"),
) -> None:
    ms = performance_now(build_clock(get_settings()))
    if iso:
        typer.echo(epoch_ms_to_dt(ms).isoformat())
    else:
        typer.echo(f"{ms:.3f}")


if __name__ == "__main__":  # pragma: no cover
    app()

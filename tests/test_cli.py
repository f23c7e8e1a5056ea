from __future__ import annotations

import json

from typer.testing import CliRunner

from mappersmith_utils.__main__ import app

runner = CliRunner()


def test_qs_from_argument():
    result = runner.invoke(app, ["qs", '{"a": [1, 2], "b": "x y", "c": null}'])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "a%5B%5D=1&a%5B%5D=2&b=x+y"


def test_qs_from_stdin():
    result = runner.invoke(app, ["qs"], input='{"a": {"b": true}}')
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "a%5Bb%5D=true"


def test_qs_invalid_json():
    result = runner.invoke(app, ["qs", "{not json"])
    assert result.exit_code == 2
    assert "invalid JSON" in result.output


def test_headers_from_stdin():
    raw = "Content-Type: application/json\r\nETag: W/\"abc\"\r\n"
    result = runner.invoke(app, ["headers"], input=raw)
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"content-type": "application/json", "etag": 'W/"abc"'}


def test_headers_from_file(tmp_path):
    path = tmp_path / "headers.txt"
    path.write_text("X-Limit: 60\nX-Reset: 1447102379\n", encoding="latin-1")
    result = runner.invoke(app, ["headers", "--file", str(path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"x-limit": "60", "x-reset": "1447102379"}


def test_btoa_and_atob():
    encoded = runner.invoke(app, ["btoa", "user:secret"])
    assert encoded.exit_code == 0
    assert encoded.output.strip() == "dXNlcjpzZWNyZXQ="
    decoded = runner.invoke(app, ["atob", "dXNlcjpzZWNyZXQ="])
    assert decoded.exit_code == 0
    assert decoded.output.strip() == "user:secret"


def test_btoa_non_latin1_exits_with_error():
    result = runner.invoke(app, ["btoa", "✈"])
    assert result.exit_code == 2
    assert "outside of the Latin1 range" in result.output


def test_atob_malformed_exits_with_error():
    result = runner.invoke(app, ["atob", "abcde"])
    assert result.exit_code == 2
    assert "'atob' failed" in result.output


def test_now_with_fixed_clock(monkeypatch):
    monkeypatch.setenv("CLOCK", "fixed")
    monkeypatch.setenv("FIXED_CLOCK_AT", "2017-08-08T20:57:00Z")
    result = runner.invoke(app, ["now"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "1502225820000.000"
    iso = runner.invoke(app, ["now", "--iso"])
    assert iso.output.strip() == "2017-08-08T20:57:00+00:00"


def test_invalid_configuration_reported(monkeypatch):
    monkeypatch.setenv("CLOCK", "fixed")
    result = runner.invoke(app, ["now"])
    assert result.exit_code == 2
    assert "invalid configuration" in result.output

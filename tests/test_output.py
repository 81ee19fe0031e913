"""Tests for response output."""

from pathlib import Path

import pytest
import yaml

from devops_tools.models import OutputOptions
from devops_tools.output import render, write

RESPONSE = b'{"issues": [{"key": "OPS-1"}, {"key": "OPS-2"}], "total": 2}'


def test_render_raw() -> None:
    """Test that JSON output without a query is the raw response."""
    assert render(RESPONSE, OutputOptions()) == RESPONSE.decode()


def test_render_raw_non_json() -> None:
    """Test that a non-JSON response passes through without a query."""
    assert render(b"plain", OutputOptions()) == "plain"


def test_render_query() -> None:
    """Test filtering with a JMESPath query."""
    assert render(RESPONSE, OutputOptions(query="issues[].key")) == '[\n  "OPS-1",\n  "OPS-2"\n]'


def test_render_yaml() -> None:
    """Test YAML output."""
    text = render(RESPONSE, OutputOptions(format="yaml", query="total"))
    assert yaml.safe_load(text) == 2

    text = render(RESPONSE, OutputOptions(format="YAML"))
    assert yaml.safe_load(text)["issues"][0]["key"] == "OPS-1"


def test_render_errors() -> None:
    """Test unknown formats and queries on non-JSON responses."""
    with pytest.raises(ValueError, match="Unknown output format"):
        render(RESPONSE, OutputOptions(format="xml"))
    with pytest.raises(ValueError, match="not JSON"):
        render(b"plain", OutputOptions(query="a"))


def test_write_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Test writing to stdout."""
    write(b'{"code": 204}', OutputOptions())
    assert capsys.readouterr().out == '{"code": 204}\n'


def test_write_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test writing to a file."""
    path = tmp_path / "out.json"

    write(RESPONSE, OutputOptions(output=str(path), query="total"))

    assert path.read_text() == "2\n"
    assert capsys.readouterr().out == ""

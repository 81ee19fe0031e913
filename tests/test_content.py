"""Tests for content resolution."""

from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from devops_tools import content
from devops_tools.errors import HttpError


def test_load_empty() -> None:
    """Test that an empty value resolves to no content."""
    assert content.load("") == b""


def test_load_inline_text() -> None:
    """Test that a value that is neither a file nor a URL is returned as is."""
    assert content.load("project = OPS") == b"project = OPS"
    assert content.load_text("x" * 5000) == "x" * 5000


def test_load_file(tmp_path: Path) -> None:
    """Test reading a file."""
    path = tmp_path / "description.md"
    path.write_bytes(b"# Outage\n")

    assert content.load(str(path)) == b"# Outage\n"
    assert content.is_file(str(path))
    assert not content.is_file(str(tmp_path / "missing.md"))


def test_load_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test fetching a URL."""
    response = Mock(status_code=200, content=b"from url")
    get = Mock(return_value=response)
    monkeypatch.setattr("devops_tools.content.requests.get", get)

    assert content.load("https://example.com/q.txt", timeout=7) == b"from url"
    get.assert_called_once_with("https://example.com/q.txt", timeout=7)


def test_load_url_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a failing URL raises HttpError."""
    monkeypatch.setattr(
        "devops_tools.content.requests.get", Mock(return_value=Mock(status_code=500, content=b"boom"))
    )

    with pytest.raises(HttpError) as excinfo:
        content.load("https://example.com/q.txt")
    assert excinfo.value.status_code == 500


def test_load_url_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a connection failure raises HttpError."""
    monkeypatch.setattr(
        "devops_tools.content.requests.get", Mock(side_effect=requests.ConnectionError("refused"))
    )

    with pytest.raises(HttpError, match="refused"):
        content.load("http://example.com/q.txt")

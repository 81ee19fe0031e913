"""Tests for vendor interfaces."""

import base64

import pytest

from devops_tools.vendor import IssueTracker, LogManagement, auth_header
from devops_tools.vendors import Graylog, Jira


def test_auth_header_basic() -> None:
    """Test that a user selects basic auth, even with a token."""
    expected = base64.b64encode(b"alice:pw").decode()
    assert auth_header("alice", "pw") == f"Basic {expected}"
    assert auth_header("alice", "pw", "token") == f"Basic {expected}"


def test_auth_header_bearer() -> None:
    """Test that a token without a user selects bearer auth."""
    assert auth_header("", "pw", "token") == "Bearer token"


def test_auth_header_none() -> None:
    """Test that no credentials give no header."""
    assert auth_header() == ""


def test_interfaces_are_abstract() -> None:
    """Test that the interfaces cannot be instantiated."""
    with pytest.raises(TypeError):
        IssueTracker()  # type: ignore[abstract]
    with pytest.raises(TypeError):
        LogManagement()  # type: ignore[abstract]


def test_clients_implement_interfaces() -> None:
    """Test that vendor clients implement their interfaces."""
    assert issubclass(Jira, IssueTracker)
    assert issubclass(Graylog, LogManagement)

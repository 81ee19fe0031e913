"""Tests for HTTP transport."""

from unittest.mock import MagicMock, Mock

import pytest
import requests

from devops_tools.errors import HttpError
from devops_tools.http import HttpClient, build_headers, build_url


@pytest.fixture
def http_client() -> HttpClient:
    """Create an HTTP client with a mocked session."""
    client = HttpClient(timeout=5)
    client.session = MagicMock(spec=requests.Session)
    return client


def make_response(status_code: int, body: bytes = b"") -> Mock:
    """Create a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.content = body
    response.text = body.decode()
    return response


def test_build_url() -> None:
    """Test joining paths and encoding sorted query parameters."""
    assert build_url("https://host", "/rest/api/2/issue") == "https://host/rest/api/2/issue"
    assert build_url("https://host/base/", "/rest/api/2/issue/A-1") == "https://host/base/rest/api/2/issue/A-1"
    assert build_url("https://host", "/search", {"b": "2", "a": "x y"}) == "https://host/search?a=x+y&b=2"


def test_build_headers_skips_empty() -> None:
    """Test that empty header values are left out."""
    assert build_headers() == {}
    assert build_headers("application/json", "") == {"Content-Type": "application/json"}
    assert build_headers("", "Bearer t") == {"Authorization": "Bearer t"}


def test_insecure_disables_verification() -> None:
    """Test that insecure turns off TLS verification."""
    assert HttpClient(insecure=True).session.verify is False
    assert HttpClient().session.verify is True


def test_get_returns_body(http_client: HttpClient) -> None:
    """Test that GET returns the raw body and passes the timeout."""
    http_client.session.request.return_value = make_response(200, b"ok")

    assert http_client.get("https://host/x", "application/json", "Bearer t") == b"ok"

    call_args = http_client.session.request.call_args
    assert call_args[0] == ("GET", "https://host/x")
    assert call_args[1]["timeout"] == 5
    assert call_args[1]["headers"] == {"Content-Type": "application/json", "Authorization": "Bearer t"}


def test_get_extra_headers(http_client: HttpClient) -> None:
    """Test that extra GET headers are sent next to the auth header."""
    http_client.session.request.return_value = make_response(200, b"ok")

    http_client.get("https://host/x", auth="Bearer t", headers={"Accept": "application/json"})

    assert http_client.session.request.call_args[1]["headers"] == {
        "Authorization": "Bearer t",
        "Accept": "application/json",
    }


def test_post_with_code(http_client: HttpClient) -> None:
    """Test that the status code is returned alongside the body."""
    http_client.session.request.return_value = make_response(204)

    body, code = http_client.post_with_code("https://host/x", "application/json", "", b"{}")

    assert body == b""
    assert code == 204
    assert http_client.session.request.call_args[1]["data"] == b"{}"


def test_non_2xx_raises(http_client: HttpClient) -> None:
    """Test that a non-2xx status raises HttpError carrying the status and body."""
    http_client.session.request.return_value = make_response(404, b"not found")

    with pytest.raises(HttpError) as excinfo:
        http_client.put("https://host/x", "application/json", "", b"{}")

    assert excinfo.value.status_code == 404
    assert excinfo.value.body == b"not found"


def test_transport_failure_raises(http_client: HttpClient) -> None:
    """Test that connection errors are wrapped in HttpError."""
    http_client.session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(HttpError, match="refused") as excinfo:
        http_client.get("https://host/x")

    assert excinfo.value.status_code is None

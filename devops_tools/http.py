"""HTTP transport shared by vendor clients."""

from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests
import structlog

from devops_tools.errors import HttpError

logger = structlog.get_logger()


def build_url(base: str, path: str, params: dict[str, Any] | None = None) -> str:
    """Join an endpoint path onto a base URL.

    The base URL path prefix is kept, so ``https://host/jira`` and
    ``/rest/api/2/issue`` give ``https://host/jira/rest/api/2/issue``.
    Query parameters are form-encoded and sorted by key.
    """
    parts = urlsplit(base)
    segments = [p.strip("/") for p in (parts.path, path) if p.strip("/")]
    joined = "/" + "/".join(segments)
    query = urlencode(sorted(params.items())) if params else ""
    return urlunsplit((parts.scheme, parts.netloc, joined, query, ""))


def build_headers(content_type: str = "", auth: str = "") -> dict[str, str]:
    """Build request headers, leaving out empty values."""
    headers = {}
    if content_type:
        headers["Content-Type"] = content_type
    if auth:
        headers["Authorization"] = auth
    return headers


class HttpClient:
    """Blocking HTTP client with a fixed timeout."""

    def __init__(self, timeout: int = 30, insecure: bool = False) -> None:
        """Initialize the client.

        Args:
            timeout: Connect and read timeout in seconds
            insecure: If True, skip TLS certificate verification
        """
        self.timeout = timeout
        self.session = requests.Session()
        self.session.verify = not insecure

    def request(self, method: str, url: str, headers: dict[str, str] | None = None, **kwargs: Any) -> tuple[bytes, int]:
        """Issue a request and return the body and status code.

        Raises:
            HttpError: On transport failure or a non-2xx status
        """
        logger.debug("HTTP request", method=method, url=url)
        try:
            response = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise HttpError(f"{method} {url} failed: {e}") from e

        logger.debug("HTTP response", method=method, url=url, status_code=response.status_code)
        if not 200 <= response.status_code < 300:
            raise HttpError(
                f"{method} {url} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.content,
            )
        return response.content, response.status_code

    def get(self, url: str, content_type: str = "", auth: str = "", headers: dict[str, str] | None = None) -> bytes:
        """GET a URL; ``headers`` are sent in addition to the content type and auth."""
        body, _ = self.request("GET", url, headers={**build_headers(content_type, auth), **(headers or {})})
        return body

    def post(self, url: str, content_type: str, auth: str, data: bytes) -> bytes:
        body, _ = self.post_with_code(url, content_type, auth, data)
        return body

    def post_with_code(self, url: str, content_type: str, auth: str, data: bytes) -> tuple[bytes, int]:
        return self.request("POST", url, headers=build_headers(content_type, auth), data=data)

    def put(self, url: str, content_type: str, auth: str, data: bytes) -> bytes:
        body, _ = self.request("PUT", url, headers=build_headers(content_type, auth), data=data)
        return body

    def post_files(self, url: str, headers: dict[str, str], files: dict[str, tuple[str, bytes]]) -> bytes:
        """POST a multipart/form-data body; requests sets the boundary header."""
        body, _ = self.request("POST", url, headers=headers, files=files)
        return body

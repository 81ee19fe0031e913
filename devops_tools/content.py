"""Resolve option values that may name a file or URL."""

from pathlib import Path

import requests
import structlog

from devops_tools.errors import HttpError

logger = structlog.get_logger()


def is_file(value: str) -> bool:
    """Check whether a value names an existing file."""
    if not value:
        return False
    try:
        return Path(value).expanduser().is_file()
    except (OSError, ValueError):
        # name too long, embedded NUL and the like
        return False


def load(value: str, timeout: int = 30) -> bytes:
    """Return the content a value points to.

    A value starting with http:// or https:// is fetched, a path to an
    existing file is read, anything else is returned as its own bytes.
    """
    if not value:
        return b""

    if value.startswith(("http://", "https://")):
        logger.debug("Loading content from URL", url=value)
        try:
            response = requests.get(value, timeout=timeout)
        except requests.RequestException as e:
            raise HttpError(f"GET {value} failed: {e}") from e
        if not 200 <= response.status_code < 300:
            raise HttpError(
                f"GET {value} returned {response.status_code}",
                status_code=response.status_code,
                body=response.content,
            )
        return response.content

    if is_file(value):
        logger.debug("Loading content from file", path=value)
        return Path(value).expanduser().read_bytes()

    return value.encode("utf-8")


def load_text(value: str, timeout: int = 30) -> str:
    """Like load, decoded as UTF-8."""
    return load(value, timeout=timeout).decode("utf-8")

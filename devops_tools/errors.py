"""Exceptions raised by vendor clients."""


class ToolsError(Exception):
    """Base class for errors reported per request."""


class HttpError(ToolsError):
    """An HTTP call failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, body: bytes = b"") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UnexpectedResponseError(ToolsError):
    """A vendor response did not have the expected shape."""

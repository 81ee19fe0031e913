"""Helpers shared by the vendor subcommands."""

import dataclasses
import sys
from collections.abc import Callable
from typing import Any, NoReturn

import structlog

from devops_tools import content, output
from devops_tools.errors import ToolsError
from devops_tools.models import OutputOptions

logger = structlog.get_logger()

SECRET_FIELDS = ("password", "access_token")


def fatal(message: str) -> NoReturn:
    """Report a setup failure and abort."""
    logger.critical(message)
    print(f"Error: {message}", file=sys.stderr)
    raise SystemExit(1)


def redact(options: Any) -> dict[str, Any]:
    """Options as a dict with secrets masked, for debug logging."""
    values = dataclasses.asdict(options)
    for name in SECRET_FIELDS:
        if values.get(name):
            values[name] = "********"
    return values


def debug_options(vendor: str, *options: Any) -> None:
    """Log each options object at debug level with secrets masked."""
    for opts in options:
        logger.debug(f"{vendor} options", kind=type(opts).__name__, **redact(opts))


def resolve(value: str, what: str, timeout: int = 30) -> str:
    """Resolve a text option that may name a file or URL; abort on failure."""
    try:
        return content.load_text(value, timeout=timeout)
    except (ToolsError, OSError, UnicodeDecodeError) as e:
        fatal(f"Failed to load {what}: {e}")


def resolve_bytes(value: str, what: str, timeout: int = 30) -> bytes:
    """Resolve a binary option that may name a file or URL; abort on failure."""
    try:
        return content.load(value, timeout=timeout)
    except (ToolsError, OSError) as e:
        fatal(f"Failed to load {what}: {e}")


def emit(vendor: str, call: Callable[[], bytes], options: OutputOptions) -> bool:
    """Run one request and write its response.

    Request failures are reported on stderr and do not abort the process.

    Returns:
        True if a response was written
    """
    try:
        data = call()
        output.write(data, options)
    except (ToolsError, ValueError, OSError) as e:
        logger.error(f"{vendor} request failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return False
    return True

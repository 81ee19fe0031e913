"""Response output: optional JMESPath query, JSON or YAML, stdout or file."""

import json
import sys
from pathlib import Path
from typing import Any

import jmespath
import structlog
import yaml

from devops_tools.models import OutputOptions

logger = structlog.get_logger()

FORMATS = ("json", "yaml")


def render(data: bytes, options: OutputOptions) -> str:
    """Render a raw response for output.

    Without a query, JSON output is the response as received.

    Raises:
        ValueError: On an unknown format, or a query against a non-JSON response
    """
    fmt = (options.format or "json").lower()
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: '{options.format}'. Use one of: {', '.join(FORMATS)}")

    text = data.decode("utf-8", errors="replace")
    if not options.query and fmt == "json":
        return text

    try:
        value: Any = json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Response is not JSON, cannot apply query or format: {e}") from e

    if options.query:
        logger.debug("Applying output query", query=options.query)
        value = jmespath.search(options.query, value)

    if fmt == "yaml":
        return yaml.safe_dump(value, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(value, indent=2, ensure_ascii=False)


def write(data: bytes, options: OutputOptions) -> None:
    """Render a response and write it to the configured destination."""
    text = render(data, options)
    if options.output:
        path = Path(options.output).expanduser()
        path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
        logger.info("Output written", path=str(path))
        return
    sys.stdout.write(text if text.endswith("\n") else text + "\n")

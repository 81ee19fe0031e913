"""JSON payload helpers for vendor requests."""

import json
from collections.abc import Callable
from typing import Any

from devops_tools import content


def compact(mapping: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None, an empty string or an empty list."""
    return {k: v for k, v in mapping.items() if v is not None and v != "" and v != []}


def read_custom_fields(source: str, loader: Callable[[str], bytes] = content.load) -> dict[str, Any]:
    """Read a custom-field map from inline JSON, a file or a URL.

    Raises:
        ValueError: If the content is not a JSON object
    """
    if not source:
        return {}

    raw = loader(source)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid custom fields JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Custom fields must be a JSON object, got {type(data).__name__}")
    return data


def merge_fields(payload: dict[str, Any], custom_fields: dict[str, Any]) -> dict[str, Any]:
    """Merge custom fields into payload["fields"]; custom fields win on conflict."""
    if not custom_fields:
        return payload
    merged = dict(payload)
    fields = dict(merged.get("fields") or {})
    fields.update(custom_fields)
    merged["fields"] = fields
    return merged


def encode(payload: Any) -> bytes:
    return json.dumps(payload).encode("utf-8")

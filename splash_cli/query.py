"""Query-string encoding for dataclasses whose fields carry URL parameter metadata."""

from __future__ import annotations

from dataclasses import MISSING, Field, field, fields
from typing import Any
from urllib.parse import quote

# Characters a URL path segment may carry unescaped besides the unreserved ones.
_PATH_SEGMENT_SAFE = "$&+:=@"


def url_param(
    name: str,
    value: Any = MISSING,
    default: str = "",
    separator: str = "comma",
) -> Field:
    """Declare a dataclass field sent as query parameter ``name``.

    ``value`` is the field's initial value, ``default`` the text sent when the
    value is empty or zero, and ``separator`` ("comma" or "space") joins lists.
    """
    metadata = {"url": name, "default": default, "separator": separator}
    if isinstance(value, (list, tuple)):
        items = list(value)
        return field(default_factory=lambda: list(items), metadata=metadata)
    if value is MISSING:
        return field(metadata=metadata)
    return field(default=value, metadata=metadata)


def _encode_value(value: Any, default: str, separator: str) -> str:
    if isinstance(value, (list, tuple)):
        return (" " if separator == "space" else ",").join(str(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if value:
            return str(value)
        return default or "0"
    text = "" if value is None else str(value)
    return text or default


def stringify(params: Any) -> str:
    """Encode the URL-parameter fields of a dataclass instance as a query string."""
    parts = []
    for spec in fields(params):
        name = spec.metadata.get("url")
        if name is None:
            continue
        text = _encode_value(
            getattr(params, spec.name),
            spec.metadata.get("default", ""),
            spec.metadata.get("separator", "comma"),
        )
        if text:
            parts.append(f"{name}={text}")
    return quote("&".join(parts), safe=_PATH_SEGMENT_SAFE)
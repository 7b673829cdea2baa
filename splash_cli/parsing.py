"""Parsing of user-supplied setting values, photo ids and collection references."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from typing import Any

from splash_cli.expressions import cleanup_url, extract_collection_id, is_collection_url, is_photo_url

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def expand_path(path: str) -> str:
    """Expand a leading "~/" to the current user's home directory."""
    if path[:2] == "~/":
        return os.path.expanduser("~") + path[1:]
    return path


def parse_string_value(value: str) -> Any:
    """Turn "true"/"false" into booleans and integer text into ints; leave the rest as text."""
    if value == "true":
        return True
    if value == "false":
        return False
    if _INTEGER.fullmatch(value):
        number = int(value)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    return value


def parse_photo_id_from_url(url_or_id: str) -> str:
    """Return the photo id from a photo page URL, or the input if it is not one."""
    if is_photo_url(url_or_id):
        return cleanup_url(url_or_id)
    return url_or_id


def parse_collections(
    collections: Iterable[str],
    aliases: Mapping[str, str] | None = None,
) -> list[str]:
    """Resolve collection URLs to ids and aliases to their collection ids."""
    aliases = aliases or {}

    def resolve(reference: str) -> str:
        if is_collection_url(reference):
            collection_id, _name = extract_collection_id(reference)
            return collection_id
        return aliases.get(reference) or reference

    return [resolve(reference) for reference in collections]
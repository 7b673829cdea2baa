"""A JSON settings file with dotted keys layered over built-in defaults."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

_TRUE_WORDS = frozenset({"1", "t", "true"})
_MISSING = object()


def default_settings() -> dict[str, Any]:
    """Return a fresh copy of the built-in default settings."""
    return {
        "update": {
            "last_update": -1,
            "latest_tag": None,
        },
        "download_dir": "~/Pictures/splash_photos",
        "auto_like_photos": False,
        "collection_aliases": {},
        # Cache of the last photo of the day; refresh_interval is in seconds.
        "photo_of_the_day": {
            "id": "",
            "last_update": 0,
            "refresh_interval": 6 * 60 * 60,
        },
        "auth": {
            "access_token": "",
            "refresh_token": "",
        },
    }


def _split(key: str) -> list[str]:
    return key.lower().split(".")


def _walk(tree: Mapping[str, Any], parts: list[str]) -> Any:
    node: Any = tree
    for part in parts:
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node


def _deep_merge(base: Mapping[str, Any], top: Mapping[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(dict(base))
    for key, value in top.items():
        below = merged.get(key)
        if isinstance(value, Mapping) and isinstance(below, Mapping):
            merged[key] = _deep_merge(below, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return False


def _to_int(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip(), 0)
        except ValueError:
            return 0
    return 0


class SettingsStore:
    """Settings kept in a JSON file; lookups fall back to the defaults."""

    def __init__(self, path: str | Path, defaults: Mapping[str, Any] | None = None) -> None:
        self.path = Path(path)
        self._defaults: dict[str, Any] = copy.deepcopy(
            dict(defaults) if defaults is not None else default_settings()
        )
        self._values: dict[str, Any] = {}

    def read(self) -> None:
        """Load the settings file; raise FileNotFoundError if it does not exist."""
        with self.path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"settings file {self.path} does not hold a JSON object")
        self._values = data

    def _all_settings(self) -> dict[str, Any]:
        return _deep_merge(self._defaults, self._values)

    def write(self) -> None:
        """Write every setting, defaults included, to the settings file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(self._all_settings(), handle, indent=2)
            handle.write("\n")

    def safe_write(self) -> None:
        """Write the settings file only if it does not exist yet; raise FileExistsError otherwise."""
        if self.path.exists():
            raise FileExistsError(f"settings file already exists: {self.path}")
        self.write()

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at the dotted ``key``, or ``default`` if it is set nowhere."""
        parts = _split(key)
        value = _walk(self._values, parts)
        fallback = _walk(self._defaults, parts)
        if value is _MISSING:
            return default if fallback is _MISSING else copy.deepcopy(fallback)
        if isinstance(value, Mapping) and isinstance(fallback, Mapping):
            return _deep_merge(fallback, value)
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        """Set the dotted ``key`` to ``value``, replacing whatever was there."""
        *parents, leaf = _split(key)
        node = self._values
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[leaf] = copy.deepcopy(value)

    def get_string(self, key: str) -> str:
        """The value at ``key`` as text; "" if unset."""
        return _to_string(self.get(key))

    def get_bool(self, key: str) -> bool:
        """The value at ``key`` as a boolean; False if unset or not one."""
        return _to_bool(self.get(key))

    def get_int(self, key: str) -> int:
        """The value at ``key`` as an integer; 0 if unset or not one."""
        return _to_int(self.get(key))

    def get_string_map(self, key: str) -> dict[str, str]:
        """A new dict of the mapping at ``key`` with its values as text; {} if not a mapping."""
        value = self.get(key)
        if not isinstance(value, Mapping):
            return {}
        return {str(name): _to_string(item) for name, item in value.items()}
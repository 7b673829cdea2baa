"""Release version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUMBER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Version:
    """A major.minor.patch version."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def is_newer_than(self, other: Version) -> bool:
        """True if any component of this version exceeds the same one in ``other``."""
        return self.major > other.major or self.minor > other.minor or self.patch > other.patch


def _component(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid version component: {text!r}")
    return int(text)


def parse_version(text: str) -> Version:
    """Parse "major.minor.patch"; raise ValueError if it is not in that form."""
    parts = text.split(".")
    if len(parts) < 3:
        raise ValueError(f"invalid version: {text!r}")
    return Version(_component(parts[0]), _component(parts[1]), _component(parts[2]))
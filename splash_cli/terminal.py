"""Terminal capability checks and hyperlink output."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping, Sequence

ESC = "\x1b["
OSC = "\x1b]"
BEL = "\x07"
SEP = ";"

_COMPACT_VERSION = re.compile(r"(\d{1,2})(\d{2})")
_NUMBER = re.compile(r"[+-]?\d+")
_FLAG_PREFIX = re.compile(r"^-{1,2}")


def _to_int(text: str) -> int:
    return int(text) if _NUMBER.fullmatch(text) else 0


def parse_term_version(version: str) -> tuple[int, int, int]:
    """Parse a terminal version such as "3.4.1" or a compact one such as "5402"."""
    if "." not in version:
        match = _COMPACT_VERSION.search(version)
        if match is None:
            return 0, 0, 0
        return 0, int(match.group(1)), int(match.group(2))

    parts = version.split(".") + ["", ""]
    return _to_int(parts[0]), _to_int(parts[1]), _to_int(parts[2])


def _has_flag(flag: str, argv: Sequence[str]) -> bool:
    return any(_FLAG_PREFIX.sub("", arg) == flag for arg in argv)


def supports_hyperlinks(
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
) -> bool:
    """Decide whether the terminal described by ``env`` and ``argv`` renders OSC 8 links."""
    env = os.environ if env is None else env
    argv = sys.argv if argv is None else argv

    if "FORCE_HYPERLINK" in env:
        forced = env["FORCE_HYPERLINK"]
        if not _NUMBER.fullmatch(forced):
            return False
        return int(forced) != 0

    if _has_flag("no-hyperlink", argv) or _has_flag("no-hyperlinks", argv):
        return False
    if _has_flag("hyperlink=true", argv) or _has_flag("hyperlink=always", argv):
        return True
    if "NETLIFY" in env:
        return True
    if "CI" in env or "TEAMCITY_VERSION" in env:
        return False

    if "VTE_VERSION" in env:
        if env["VTE_VERSION"] == "0.50.0":
            return False
        major, minor, _ = parse_term_version(env["VTE_VERSION"])
        return major > 0 or minor >= 50

    if env.get("TERM_PROGRAM") == "iTerm.app":
        major, minor, _ = parse_term_version(env.get("TERM_PROGRAM_VERSION", ""))
        return (major == 3 and minor >= 1) or major > 3

    return False


def format_hyperlink(
    text: str,
    url: str,
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
) -> str:
    """Return a clickable link if supported, otherwise "text (url)"."""
    if supports_hyperlinks(env, argv):
        return "".join((OSC, "8", SEP, SEP, url, BEL, text, OSC, "8", SEP, SEP, BEL))
    return f"{text} ({url})"
"""ANSI colour escape sequences from compact style strings such as "yellow+b:red"."""

from __future__ import annotations

import re

RESET = "\x1b[0m"
_START = "\x1b["

_COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "default": 9,
}

_ATTRIBUTES = (
    ("b", "1;"),
    ("d", "2;"),
    ("B", "5;"),
    ("u", "4;"),
    ("i", "7;"),
    ("s", "9;"),
)

_INTEGER = re.compile(r"[+-]?\d+")


def _split_style(part: str) -> tuple[str, str]:
    pieces = part.split("+")
    return pieces[0], pieces[1] if len(pieces) > 1 else ""


def _color_number(key: str, base: int, extended: str) -> str:
    if _INTEGER.fullmatch(key):
        return f"{extended};5;{int(key)};"
    return f"{base + _COLORS.get(key, 0)};"


def color_code(style: str) -> str:
    """Return the escape sequence for ``style`` ("fg+attrs:bg+attrs", "reset" or "off")."""
    if not style or style == "off":
        return ""
    if style == "reset":
        return RESET

    parts = style.split(":")
    fg_key, fg_style = _split_style(parts[0])
    bg_key, bg_style = _split_style(parts[1]) if len(parts) > 1 else ("", "")

    codes = [sequence for flag, sequence in _ATTRIBUTES if flag in fg_style]
    codes.append(_color_number(fg_key, 90 if "h" in fg_style else 30, "38"))
    if bg_key:
        codes.append(_color_number(bg_key, 100 if "h" in bg_style else 40, "48"))

    return _START + "".join(codes)[:-1] + "m"


def colorize(text: str, style: str) -> str:
    """Wrap ``text`` in the escape sequence for ``style`` followed by a reset."""
    return color_code(style) + text + RESET


def yellow(text: str) -> str:
    """Bold yellow text."""
    return color_code("yellow+b") + text + color_code("reset")


def blue(text: str) -> str:
    """Bold blue text."""
    return color_code("blue+b") + text + color_code("reset")
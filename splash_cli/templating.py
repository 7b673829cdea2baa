"""Text templates with colour and number-formatting helpers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, is_dataclass
from typing import Any

from jinja2 import Environment

from splash_cli.colors import colorize


def _scalar_to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.0f}" if value.is_integer() else f"{value:.2f}"
    raise TypeError(f"cannot convert type to string: {value!r}")


def color(style: str, value: Any) -> str:
    """Colour a scalar value (string, number, bool or None) with ``style``."""
    return colorize(_scalar_to_string(value), style)


def format_number(n: int) -> str:
    """Abbreviate ``n`` with K, M or G suffixes from one thousand upwards."""
    if n < 1_000:
        return str(n)
    if n < 1_000_000:
        return f"{n / 1_000:.1f}K"
    if n < 1_000_000_000:
        return f"{n / 1_000_000:.1f}M"
    return f"{n / 1_000_000_000:.1f}G"


def _style_function(style: str) -> Callable[[Any], str]:
    def apply(text: Any) -> str:
        text = str(text)
        return colorize(text, style) if text else text

    return apply


_ENVIRONMENT = Environment(autoescape=False, keep_trailing_newline=True)
_ENVIRONMENT.globals.update(
    color=color,
    underline=_style_function("default+u"),
    dim=_style_function("default+d"),
    bold=_style_function("default+b"),
    bg_yellow=_style_function("black+b:yellow"),
    bg_red=_style_function("black+b:red"),
    diff=lambda a, b: a - b,
    abs=abs,
    format_number=format_number,
)


def _context(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    if is_dataclass(data) and not isinstance(data, type):
        return {spec.name: getattr(data, spec.name) for spec in fields(data)}
    if hasattr(data, "__dict__"):
        return dict(vars(data))
    raise TypeError(f"cannot use {type(data).__name__} as template data")


@dataclass
class Template:
    """A template source together with the data it is rendered with."""

    template: str
    data: Any = None

    def render(self) -> str:
        """Render the template; syntax errors raise jinja2.TemplateSyntaxError."""
        return _ENVIRONMENT.from_string(self.template).render(_context(self.data))


def render_template(text: str, data: Any) -> str:
    """Render ``text`` with ``data`` (a mapping, dataclass or plain object)."""
    return Template(text, data).render()
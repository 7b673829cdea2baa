from dataclasses import dataclass

import jinja2
import pytest

from splash_cli.colors import colorize
from splash_cli.templating import Template, color, format_number, render_template


@dataclass
class Author:
    name: str


@dataclass
class Item:
    title: str
    likes: int
    author: Author


def test_render_mapping():
    assert render_template("Hi {{ name }}!", {"name": "Ann"}) == "Hi Ann!"


def test_render_dataclass_attributes():
    item = Item("Sea", 12, Author("Bob"))
    assert render_template("{{ title }} by {{ author.name }}", item) == "Sea by Bob"


def test_template_class_with_style_function():
    assert Template("{{ bold(name) }}", {"name": "x"}).render() == colorize("x", "default+b")


def test_style_function_keeps_empty_text():
    assert render_template("[{{ underline('') }}]", {}) == "[]"


def test_trailing_newline_kept():
    assert render_template("line\n", None).endswith("\n")


def test_format_number_in_template():
    assert render_template("{{ format_number(n) }}", {"n": 5}) == format_number(5)


def test_syntax_error_raises():
    with pytest.raises(jinja2.TemplateSyntaxError):
        render_template("{{ ", {})


def test_format_number_small():
    assert format_number(999) == "999"


def test_format_number_thousands():
    assert format_number(1000) == "1.0K"


def test_format_number_suffixes():
    assert format_number(2_500_000).endswith("M")
    assert format_number(3_000_000_000).endswith("G")
    assert format_number(999_999).endswith("K")


def test_color_with_string():
    assert color("red", "hi") == colorize("hi", "red")


def test_color_with_numbers():
    assert color("red", 3.0) == colorize("3", "red")
    assert color("red", 2.5) == colorize("2.50", "red")


def test_color_with_none_and_bool():
    assert color("red", None) == colorize("", "red")
    assert color("red", True) == colorize("true", "red")


def test_color_rejects_other_types():
    with pytest.raises(TypeError):
        color("red", [1, 2])
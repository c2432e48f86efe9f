"""Tests for formatting utilities."""

import pytest
from rich.text import Text

from consoleui.utils.formatting import clamp_index, default_hint, menu_entry, strip_markup, styled


def test_strip_markup():
    assert strip_markup("[bold]Bed[/bold] [red]mesh[/]") == "Bed mesh"


def test_strip_markup_keeps_escaped_brackets():
    assert strip_markup("Printer \\[P1]") == "Printer [P1]"


@pytest.mark.parametrize("text", ["[/dev/ttyUSB0]", "Serial [/dev/ttyUSB0]", "[bold]open [/close]"])
def test_strip_markup_unbalanced_closing_tag_kept(text):
    assert strip_markup(text) == text


def test_menu_entry_unbalanced_closing_tag():
    assert menu_entry("Serial [/dev/ttyUSB0] | fast") == "Serial [/dev/ttyUSB0] \\| fast"


def test_styled_escapes_text():
    markup = styled("[bold]x[/bold]", "red")

    assert markup.startswith("[red]")
    assert Text.from_markup(markup).plain == "[bold]x[/bold]"


def test_menu_entry_escapes_pipe():
    assert menu_entry("[green]Cyan[/green] | Teal") == "Cyan \\| Teal"


@pytest.mark.parametrize(
    "index,count,expected",
    [(0, 3, 0), (2, 3, 2), (5, 3, 2), (-4, 3, 0), (3, 0, 0)],
)
def test_clamp_index(index, count, expected):
    assert clamp_index(index, count) == expected


def test_default_hint():
    assert default_hint("localhost") == " [localhost]"
    assert default_hint("") == ""
    assert default_hint(None) == ""

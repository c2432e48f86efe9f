"""Formatting utilities for consoleui."""

from typing import Optional

from rich.errors import MarkupError
from rich.markup import escape
from rich.text import Text


def strip_markup(text: str) -> str:
    """Remove rich markup tags, keeping the visible text.

    Text that does not parse as markup (a stray closing tag such as
    '[/dev/ttyUSB0]') is returned unchanged.
    """
    try:
        return Text.from_markup(text).plain
    except MarkupError:
        return text


def styled(text: str, style: str) -> str:
    """Wrap caller text in a style tag, escaping it first."""
    return f"[{style}]{escape(text)}[/{style}]"


def menu_entry(label: str) -> str:
    """Format a choice label for display in a terminal menu.

    Markup is stripped (menus cannot render it) and pipes are escaped,
    since simple-term-menu treats an unescaped '|' as the start of
    preview data.
    """
    return strip_markup(label).replace("|", "\\|")


def clamp_index(index: int, count: int) -> int:
    """Clamp a cursor position into [0, count)."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


def default_hint(default: Optional[str]) -> str:
    """Format a default value hint like ' [value]'."""
    return f" [{default}]" if default else ""

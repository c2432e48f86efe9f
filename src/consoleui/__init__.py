"""consoleui - Terminal interaction abstraction with rich and plain backends."""

from importlib.metadata import version

__version__ = version("consoleui")

from consoleui.base import ConsoleUI
from consoleui.factory import create_console_ui
from consoleui.plain_console import PlainConsoleUI
from consoleui.results import CANCELLED, AnswerKind, Selection, TextAnswer
from consoleui.rich_console import RichConsoleUI

__all__ = [
    "ConsoleUI",
    "RichConsoleUI",
    "PlainConsoleUI",
    "create_console_ui",
    "Selection",
    "CANCELLED",
    "TextAnswer",
    "AnswerKind",
]

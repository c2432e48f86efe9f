"""Plain console implementation of ConsoleUI.

For automation and non-interactive terminals: works with expect, pipes and
terminals without ANSI support. Output carries no color or markup, and
every prompt reads one line from the input stream.
"""

import sys
from typing import Awaitable, Callable, Iterable, Optional, Sequence, TextIO, TypeVar

from rich.console import Console

from consoleui.base import ConsoleUI
from consoleui.results import CANCELLED, Selection, TextAnswer
from consoleui.utils.config import Config
from consoleui.utils.constants import (
    BANNER_LINE,
    PANEL_BORDER,
    SEPARATOR_LINE,
    TABLE_UNDERLINE,
    Prefix,
)
from consoleui.utils.debug import debug_prompt, debug_select, debug_status
from consoleui.utils.formatting import clamp_index, default_hint, strip_markup

T = TypeVar("T")

# A line holding just the escape character cancels optional prompts
ESCAPE = "\x1b"


class PlainConsoleUI(ConsoleUI):
    """Line-based console UI for automation."""

    def __init__(
        self,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        config: Optional[Config] = None,
    ):
        """Initialize the plain console UI.

        Args:
            console: Console to write to (plain, no color, if omitted)
            stdin: Stream to read answers from (default: sys.stdin)
            config: Settings for the header banner
        """
        self.config = config or Config()
        self.console = console or Console(
            color_system=None,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        self.stdin = stdin or sys.stdin

    def _print(self, text: str = "", end: str = "\n") -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, end=end)

    def _read_line(self, prompt: str = "") -> str:
        """Print a prompt and read one line (without the newline).

        Raises:
            EOFError: When the input stream is exhausted
        """
        if prompt:
            self._print(prompt, end="")
        line = self.stdin.readline()
        if not line:
            raise EOFError("End of input while waiting for an answer")
        return line.rstrip("\r\n")

    # Output -------------------------------------------------------------

    def write_line(self, text: str = "") -> None:
        self._print(text)

    def write_markup(self, markup: str) -> None:
        self._print(strip_markup(markup))

    def write_error(self, message: str) -> None:
        self._print(f"{Prefix.ERROR}{message}")

    def write_warning(self, message: str) -> None:
        self._print(f"{Prefix.WARNING}{message}")

    def write_success(self, message: str) -> None:
        self._print(f"{Prefix.SUCCESS}{message}")

    def write_info(self, message: str) -> None:
        self._print(f"{Prefix.INFO}{message}")

    def write_header(self, version: str) -> None:
        width = len(BANNER_LINE)
        self._print(BANNER_LINE)
        self._print(self.config.app_name.center(width).rstrip())
        self._print(f"Version {version}".center(width).rstrip())
        self._print(BANNER_LINE)
        self._print()

    def write_panel(self, content: str) -> None:
        self._print(PANEL_BORDER)
        for line in strip_markup(content).splitlines() or [""]:
            self._print(f"| {line}")
        self._print(PANEL_BORDER)
        self._print()

    def write_rule(self, title: Optional[str] = None) -> None:
        if title is not None:
            self._print(f"--- {title} ---")
        else:
            self._print(SEPARATOR_LINE)

    def write_table(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> None:
        self._print("\t".join(headers))
        self._print(TABLE_UNDERLINE)
        for row in rows:
            self._print("\t".join(strip_markup(cell) for cell in row))
        self._print()

    def write_grid(self, items: Iterable[tuple[str, str]]) -> None:
        for label, value in items:
            self._print(f"  {label}: {strip_markup(value)}")

    # Prompts ------------------------------------------------------------

    def confirm(self, prompt: str, default: bool = True) -> bool:
        hint = "Y/n" if default else "y/N"
        answer = self._read_line(f"{prompt} [{hint}]: ").strip().lower()
        if not answer:
            return default
        return answer in ("y", "yes")

    def ask(self, prompt: str, default: Optional[str] = None) -> str:
        answer = self._read_line(f"{prompt}{default_hint(default)}: ").strip()
        if not answer and default is not None:
            return default
        return answer

    def ask_int(self, prompt: str, default: int) -> int:
        answer = self._read_line(f"{prompt} [{default}]: ").strip()
        if not answer:
            return default
        try:
            return int(answer)
        except ValueError:
            debug_prompt("not an integer, using default", answer=answer, default=default)
            return default

    def ask_secret(self, prompt: str, default: Optional[str] = None) -> str:
        # No masking without a terminal
        return self.ask(prompt, default)

    def ask_optional(self, prompt: str, current: Optional[str] = None) -> TextAnswer:
        line = self._read_line(f"{prompt}{default_hint(current)} (Esc+Enter to cancel): ")
        if line.strip() == ESCAPE:
            debug_prompt("optional input cancelled", prompt=prompt)
            return TextAnswer.cancel()
        answer = line.strip()
        if not answer and current:
            return TextAnswer.of(current)
        return TextAnswer.of(answer)

    def _print_choices(self, title: str, choices: list[str], marked: Optional[int] = None):
        self._print(title)
        for i, choice in enumerate(choices):
            if marked is None:
                self._print(f"  {i + 1}. {strip_markup(choice)}")
            else:
                # Mark the suggested starting position with asterisk
                marker = "*" if i == marked else " "
                self._print(f" {marker}{i + 1}. {strip_markup(choice)}")

    def select_one(self, title: str, choices: Iterable[str]) -> str:
        choice_list = list(choices)
        self._print_choices(title, choice_list)
        answer = self._read_line(f"Enter choice (1-{len(choice_list)}): ").strip()

        if answer.isdigit() and 1 <= int(answer) <= len(choice_list):
            return choice_list[int(answer) - 1]

        # Default to first choice
        return choice_list[0]

    def select_one_with_escape_and_index(
        self,
        title: str,
        choices: Iterable[str],
        start_index: int = 0,
    ) -> Selection:
        choice_list = list(choices)
        if not choice_list:
            debug_select("no choices", title=title)
            return CANCELLED

        start = clamp_index(start_index, len(choice_list))
        self._print_choices(title, choice_list, marked=start)
        self._print("  0. Cancel")
        answer = self._read_line(
            f"Enter choice (0-{len(choice_list)}) [{start + 1}]: "
        ).strip()

        if not answer:
            return Selection(choice_list[start], start)

        if answer.isdigit() and 1 <= int(answer) <= len(choice_list):
            index = int(answer) - 1
            return Selection(choice_list[index], index)

        # 0, c, escape or anything invalid cancels
        debug_select("selection cancelled", title=title, answer=answer)
        return CANCELLED

    def select_many(
        self,
        title: str,
        choices: Iterable[str],
        instructions: Optional[str] = None,
    ) -> list[str]:
        choice_list = list(choices)
        self._print(title)
        if instructions is not None:
            self._print(instructions)
        for i, choice in enumerate(choice_list):
            self._print(f"  {i + 1}. {strip_markup(choice)}")

        answer = self._read_line("Enter choices (comma-separated, e.g. 1,3): ").strip()

        result = []
        for part in answer.split(","):
            part = part.strip()
            if part.isdigit() and 1 <= int(part) <= len(choice_list):
                result.append(choice_list[int(part) - 1])
        return result

    # Screen and keys ----------------------------------------------------

    def clear(self) -> None:
        # Keep output visible in plain mode
        self._print()
        self._print(SEPARATOR_LINE)
        self._print()

    def wait_for_key(self, message: Optional[str] = None) -> None:
        if message is not None:
            self._print(message)
        self._read_line()

    def read_key(self) -> str:
        line = self._read_line()
        return line[0] if line else "\n"

    # Async --------------------------------------------------------------

    async def with_status(self, status: str, action: Callable[[], Awaitable[T]]) -> T:
        self._print(status)
        debug_status("start", status=status)
        try:
            result = await action()
        except Exception as e:
            debug_status("failed", status=status, error=repr(e))
            raise
        debug_status("done", status=status)
        return result

"""Rich implementation of ConsoleUI for interactive terminals."""

from typing import Awaitable, Callable, Iterable, Optional, Sequence, TypeVar

import questionary
import readchar
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from questionary import Style
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, InvalidResponse, Prompt
from rich.rule import Rule
from rich.table import Table

from consoleui.base import ConsoleUI
from consoleui.menu import TerminalMenuSelector
from consoleui.results import CANCELLED, Selection, TextAnswer
from consoleui.utils.config import Config
from consoleui.utils.constants import CANCELLED_TEXT, Colors
from consoleui.utils.debug import debug_prompt, debug_select, debug_status
from consoleui.utils.formatting import strip_markup, styled

T = TypeVar("T")

# Style for questionary prompts, matching the menu cursor colors
question_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:cyan"),
        ("instruction", "fg:gray"),
    ]
)


class RequiredPrompt(Prompt):
    """Prompt that keeps asking until something is typed."""

    validate_error_message = "[prompt.invalid]A value is required"

    def process_response(self, value: str) -> str:
        value = super().process_response(value)
        if not value:
            raise InvalidResponse(self.validate_error_message)
        return value


def cancel_key_bindings() -> KeyBindings:
    """Key bindings that let Escape close a text prompt with no answer."""
    bindings = KeyBindings()

    @bindings.add(Keys.Escape, eager=True)
    def _cancel(event):
        event.app.exit(result=None)

    return bindings


class RichConsoleUI(ConsoleUI):
    """ConsoleUI rendered through rich, simple-term-menu and questionary."""

    def __init__(
        self,
        console: Optional[Console] = None,
        menu: Optional[TerminalMenuSelector] = None,
        config: Optional[Config] = None,
    ):
        """Initialize the rich console UI.

        Args:
            console: Console to render to (created from config if omitted)
            menu: Menu backend for selection prompts
            config: Settings for header, spinner and colors
        """
        self.config = config or Config()
        self.console = console or Console(
            color_system=None if self.config.color_system == "none" else self.config.color_system
        )
        self.menu = menu or TerminalMenuSelector()

    # Output -------------------------------------------------------------

    def write_line(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False)

    def write_markup(self, markup: str) -> None:
        self.console.print(markup)

    def write_error(self, message: str) -> None:
        self.console.print(styled(message, Colors.ERROR))

    def write_warning(self, message: str) -> None:
        self.console.print(styled(message, Colors.WARNING))

    def write_success(self, message: str) -> None:
        self.console.print(styled(message, Colors.SUCCESS))

    def write_info(self, message: str) -> None:
        self.console.print(styled(message, Colors.INFO))

    def write_header(self, version: str) -> None:
        color = self.config.header_color
        self.console.print(
            Panel(
                f"[bold {color}]{escape(self.config.app_name)}[/bold {color}]",
                border_style=color,
                width=min(80, self.console.width),
            )
        )
        self.console.print(styled(f"Version {version}", Colors.INFO))
        self.console.print()

    def write_panel(self, content: str) -> None:
        self.console.print(Panel(content, box=box.ROUNDED))
        self.console.print()

    def write_rule(self, title: Optional[str] = None) -> None:
        if title is not None:
            self.console.print(Rule(styled(title, Colors.RULE)))
        else:
            self.console.print(Rule())

    def write_table(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> None:
        table = Table(box=box.ROUNDED)
        for header in headers:
            table.add_column(escape(header))
        for row in rows:
            table.add_row(*row)
        self.console.print(table)
        self.console.print()

    def write_grid(self, items: Iterable[tuple[str, str]]) -> None:
        grid = Table.grid(padding=(0, 1))
        grid.add_column()
        grid.add_column()
        for label, value in items:
            grid.add_row(styled(f"{label}:", Colors.INFO), value)
        self.console.print(grid)

    # Prompts ------------------------------------------------------------

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(escape(prompt), default=default, console=self.console)

    def ask(self, prompt: str, default: Optional[str] = None) -> str:
        if default is not None:
            return Prompt.ask(escape(prompt), default=default, console=self.console)
        return RequiredPrompt.ask(escape(prompt), console=self.console)

    def ask_int(self, prompt: str, default: int) -> int:
        return IntPrompt.ask(escape(prompt), default=default, console=self.console)

    def ask_secret(self, prompt: str, default: Optional[str] = None) -> str:
        if default is not None:
            return Prompt.ask(
                escape(prompt),
                default=default,
                password=True,
                show_default=False,
                console=self.console,
            )
        return RequiredPrompt.ask(escape(prompt), password=True, console=self.console)

    def ask_optional(self, prompt: str, current: Optional[str] = None) -> TextAnswer:
        question = questionary.text(
            prompt,
            default=current or "",
            instruction="(Esc to cancel)",
            style=question_style,
            key_bindings=cancel_key_bindings(),
        )
        text = question.unsafe_ask()
        if text is None:
            debug_prompt("optional input cancelled", prompt=prompt)
            return TextAnswer.cancel()
        return TextAnswer.of(text)

    def select_one(self, title: str, choices: Iterable[str]) -> str:
        choice_list = list(choices)
        index = self.menu.select(choice_list, title=title, cancellable=False)
        choice = choice_list[index]
        self._echo_choice(choice)
        return choice

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

        index = self.menu.select(choice_list, title=title, cursor_index=start_index)

        if index is None:
            debug_select("selection cancelled", title=title)
            self.console.print(styled(CANCELLED_TEXT, Colors.INFO))
            return CANCELLED

        choice = choice_list[index]
        self._echo_choice(choice)
        return Selection(choice, index)

    def _echo_choice(self, choice: str) -> None:
        """Print the chosen label once the menu has closed."""
        self.console.print(styled(strip_markup(choice), Colors.SUCCESS))

    def select_many(
        self,
        title: str,
        choices: Iterable[str],
        instructions: Optional[str] = None,
    ) -> list[str]:
        choice_list = list(choices)
        indices = self.menu.select_many(choice_list, title=title, instructions=instructions)
        return [choice_list[i] for i in indices]

    # Screen and keys ----------------------------------------------------

    def clear(self) -> None:
        self.console.clear()

    def wait_for_key(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.write_info(message)
        readchar.readkey()

    def read_key(self) -> str:
        return readchar.readkey()

    # Async --------------------------------------------------------------

    async def with_status(self, status: str, action: Callable[[], Awaitable[T]]) -> T:
        debug_status("start", status=status)
        try:
            with self.console.status(escape(status), spinner=self.config.spinner):
                result = await action()
        except Exception as e:
            debug_status("failed", status=status, error=repr(e))
            raise
        debug_status("done", status=status)
        return result

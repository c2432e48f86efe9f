"""Base console UI interface.

ConsoleUI is the full set of terminal interactions an application may
need, independent of how they are rendered. Two adapters exist:

- RichConsoleUI: interactive terminals (rich, simple-term-menu, questionary)
- PlainConsoleUI: pipes, expect scripts and terminals without ANSI support

Call sites depend only on this interface, so either adapter can be
swapped in without changes.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Iterable, Optional, Sequence, TypeVar

from consoleui.results import Selection, TextAnswer

T = TypeVar("T")


class ConsoleUI(ABC):
    """Abstract base class for console UI adapters.

    Styled writers escape the text they are given, so markup characters in
    messages print literally. write_markup is the one raw sink.

    Errors raised by the terminal layer propagate unchanged. Adapters hold
    no locks; callers serialise their own calls.
    """

    # Output -------------------------------------------------------------

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write a line of text verbatim."""
        pass

    @abstractmethod
    def write_markup(self, markup: str) -> None:
        """Write a line with markup/color. The markup is not escaped."""
        pass

    @abstractmethod
    def write_error(self, message: str) -> None:
        """Write an error message."""
        pass

    @abstractmethod
    def write_warning(self, message: str) -> None:
        """Write a warning message."""
        pass

    @abstractmethod
    def write_success(self, message: str) -> None:
        """Write a success message."""
        pass

    @abstractmethod
    def write_info(self, message: str) -> None:
        """Write a grey/muted message."""
        pass

    @abstractmethod
    def write_header(self, version: str) -> None:
        """Display the application header/banner."""
        pass

    @abstractmethod
    def write_panel(self, content: str) -> None:
        """Display a status panel."""
        pass

    @abstractmethod
    def write_rule(self, title: Optional[str] = None) -> None:
        """Display a horizontal rule/separator."""
        pass

    @abstractmethod
    def write_table(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> None:
        """Display a table with headers and rows.

        Column count follows the headers. Rows of a different width are
        handled however the renderer handles them.
        """
        pass

    @abstractmethod
    def write_grid(self, items: Iterable[tuple[str, str]]) -> None:
        """Display label/value pairs in a grid."""
        pass

    # Prompts ------------------------------------------------------------

    @abstractmethod
    def confirm(self, prompt: str, default: bool = True) -> bool:
        """Ask for confirmation (yes/no)."""
        pass

    @abstractmethod
    def ask(self, prompt: str, default: Optional[str] = None) -> str:
        """Ask for a string input.

        With a default, empty input returns the default. Without one,
        the rich adapter keeps asking until something is typed.
        """
        pass

    @abstractmethod
    def ask_int(self, prompt: str, default: int) -> int:
        """Ask for an integer input."""
        pass

    @abstractmethod
    def ask_secret(self, prompt: str, default: Optional[str] = None) -> str:
        """Ask for a secret/password input without echoing it."""
        pass

    @abstractmethod
    def ask_optional(self, prompt: str, current: Optional[str] = None) -> TextAnswer:
        """Ask for optional input that the user may cancel.

        Returns:
            TextAnswer with kind VALUE, EMPTY (submitted nothing) or
            CANCELLED (escape pressed). A non-empty ``current`` value is
            offered as the answer kept by plain Enter.
        """
        pass

    @abstractmethod
    def select_one(self, title: str, choices: Iterable[str]) -> str:
        """Present a single-choice selection menu."""
        pass

    def select_one_with_escape(self, title: str, choices: Iterable[str]) -> Optional[str]:
        """Present a single-choice menu that can be cancelled.

        Returns:
            Selected choice, or None if cancelled
        """
        return self.select_one_with_escape_and_index(title, choices, 0).item

    @abstractmethod
    def select_one_with_escape_and_index(
        self,
        title: str,
        choices: Iterable[str],
        start_index: int = 0,
    ) -> Selection:
        """Present a cancellable single-choice menu starting at a position.

        Args:
            title: Menu title
            choices: Ordered choice labels
            start_index: 0-based cursor start, clamped into range

        Returns:
            Selection(choice, index), or CANCELLED (None, -1)
        """
        pass

    @abstractmethod
    def select_many(
        self,
        title: str,
        choices: Iterable[str],
        instructions: Optional[str] = None,
    ) -> list[str]:
        """Present a multi-choice selection menu."""
        pass

    # Screen and keys ----------------------------------------------------

    @abstractmethod
    def clear(self) -> None:
        """Clear the console."""
        pass

    @abstractmethod
    def wait_for_key(self, message: Optional[str] = None) -> None:
        """Wait for any key press."""
        pass

    @abstractmethod
    def read_key(self) -> str:
        """Read a single key press."""
        pass

    # Async --------------------------------------------------------------

    @abstractmethod
    async def with_status(self, status: str, action: Callable[[], Awaitable[T]]) -> T:
        """Await an action while a status/spinner is displayed.

        The indicator is removed however the action ends. The action's
        result is returned and its exception re-raised unchanged.
        """
        pass

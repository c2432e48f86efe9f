"""Pick a ConsoleUI backend for the current terminal."""

import os
import sys
from typing import Optional

from rich.console import Console

from consoleui.base import ConsoleUI
from consoleui.plain_console import PlainConsoleUI
from consoleui.rich_console import RichConsoleUI
from consoleui.utils.config import Config, normalize_backend
from consoleui.utils.constants import BACKEND_AUTO, BACKEND_PLAIN, BACKEND_RICH
from consoleui.utils.debug import debug_backend


def is_interactive_terminal() -> bool:
    """Whether stdin and stdout are attached to a capable terminal."""
    if os.environ.get("TERM", "") in ("dumb", "unknown"):
        return False
    return sys.stdin.isatty() and sys.stdout.isatty()


def resolve_backend(name: Optional[str]) -> str:
    """Resolve a backend name ('auto' picks by terminal).

    Raises:
        ConfigurationError: If the name is not a known backend
    """
    name = normalize_backend(name)
    if name == BACKEND_AUTO:
        return BACKEND_RICH if is_interactive_terminal() else BACKEND_PLAIN
    return name


def create_console_ui(
    config: Optional[Config] = None,
    *,
    backend: Optional[str] = None,
    console: Optional[Console] = None,
) -> ConsoleUI:
    """Create the console UI for this session.

    Args:
        config: Settings (loaded from the config dir if omitted)
        backend: Backend name overriding config ('rich', 'plain', 'auto')
        console: Console to render to instead of a new one
    """
    config = config or Config()
    name = resolve_backend(backend or config.backend)
    debug_backend("selected backend", backend=name, requested=backend or config.backend)

    if name == BACKEND_PLAIN:
        return PlainConsoleUI(console=console, config=config)

    return RichConsoleUI(console=console, config=config)

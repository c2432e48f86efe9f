"""Tests for backend selection."""

import pytest

from consoleui import create_console_ui
from consoleui import factory
from consoleui.plain_console import PlainConsoleUI
from consoleui.rich_console import RichConsoleUI
from consoleui.utils.config import Config
from consoleui.utils.exceptions import ConfigurationError


@pytest.fixture
def terminal(monkeypatch):
    """Control whether the session looks interactive."""

    def set_interactive(value: bool):
        monkeypatch.setattr(factory, "is_interactive_terminal", lambda: value)

    return set_interactive


@pytest.mark.parametrize("interactive,expected", [(True, "rich"), (False, "plain")])
def test_auto_picks_by_terminal(terminal, interactive, expected):
    terminal(interactive)

    assert factory.resolve_backend("auto") == expected


def test_explicit_backend_ignores_terminal(terminal):
    terminal(False)

    assert factory.resolve_backend("rich") == "rich"


def test_unknown_backend_raises():
    with pytest.raises(ConfigurationError):
        factory.resolve_backend("curses")


def test_create_uses_config_backend(mock_consoleui_dir, console):
    config = Config(mock_consoleui_dir)
    config.backend = "plain"

    ui = create_console_ui(config, console=console)

    assert isinstance(ui, PlainConsoleUI)
    assert ui.console is console
    assert ui.config is config


def test_create_backend_argument_wins(mock_consoleui_dir, console):
    config = Config(mock_consoleui_dir)
    config.backend = "plain"

    ui = create_console_ui(config, backend="rich", console=console)

    assert isinstance(ui, RichConsoleUI)


def test_create_auto_interactive(terminal, console):
    terminal(True)

    assert isinstance(create_console_ui(console=console), RichConsoleUI)


def test_env_override_selects_backend(monkeypatch, console):
    monkeypatch.setenv("CONSOLEUI_BACKEND", "plain")

    assert isinstance(create_console_ui(console=console), PlainConsoleUI)


class TestInteractiveTerminal:
    """Tests for terminal detection."""

    class _Stream:
        def __init__(self, tty: bool):
            self.tty = tty

        def isatty(self):
            return self.tty

    def test_dumb_terminal(self, monkeypatch):
        monkeypatch.setenv("TERM", "dumb")
        monkeypatch.setattr("sys.stdin", self._Stream(True))
        monkeypatch.setattr("sys.stdout", self._Stream(True))

        assert factory.is_interactive_terminal() is False

    @pytest.mark.parametrize(
        "stdin_tty,stdout_tty,expected",
        [(True, True, True), (True, False, False), (False, True, False)],
    )
    def test_requires_both_ttys(self, monkeypatch, stdin_tty, stdout_tty, expected):
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.setattr("sys.stdin", self._Stream(stdin_tty))
        monkeypatch.setattr("sys.stdout", self._Stream(stdout_tty))

        assert factory.is_interactive_terminal() is expected

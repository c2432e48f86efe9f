"""Tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from consoleui.cli import app

runner = CliRunner()

# Answers for one pass through the plain-mode walkthrough
DEMO_INPUT = [
    "Ada",  # name
    "9000",  # port
    "",  # token (keep empty default)
    "\x1b",  # note: cancel
    "2",  # color: Green
    "",  # printer: start position
    "1,4",  # features
    "2",  # action: failing task
    "3",  # action: read a key
    "k",  # the key
    "4",  # action: done
    "",  # show summary (default yes)
    "",  # any key to finish
]


def run_cli(*args, input_text=None):
    """Run consoleui CLI command and return result."""
    return runner.invoke(app, list(args), input=input_text)


class TestStatusCommand:
    """Tests for status command."""

    def test_status_defaults(self, mock_consoleui_dir):
        result = run_cli("status")

        assert result.exit_code == 0
        assert "Backend: auto (using plain)" in result.output
        assert "Debug: off" in result.output
        assert "ACProxyCam" in result.output
        assert str(mock_consoleui_dir) in result.output

    def test_no_command_shows_status(self):
        result = run_cli()

        assert result.exit_code == 0
        assert "Backend:" in result.output

    def test_status_bad_backend_in_config(self, mock_consoleui_dir):
        (mock_consoleui_dir / "config.json").write_text(json.dumps({"backend": "fancy"}))

        result = run_cli("status")

        assert result.exit_code == 1
        assert "Unknown backend 'fancy'" in result.output


class TestVersionCommand:
    """Tests for version command."""

    def test_version(self):
        from consoleui import __version__

        result = run_cli("version")

        assert result.exit_code == 0
        assert result.output.strip() == f"consoleui {__version__}"


class TestBackendCommand:
    """Tests for backend command."""

    def test_set_backend(self, mock_consoleui_dir):
        result = run_cli("backend", "Plain")

        assert result.exit_code == 0
        data = json.loads((mock_consoleui_dir / "config.json").read_text())
        assert data["backend"] == "plain"

    def test_unknown_backend(self, mock_consoleui_dir):
        result = run_cli("backend", "fancy")

        assert result.exit_code == 1
        assert "Unknown backend" in result.output
        assert not (mock_consoleui_dir / "config.json").exists()


class TestDebugCommands:
    """Tests for debug on/off."""

    def test_debug_on_then_off(self, mock_consoleui_dir):
        config_file = mock_consoleui_dir / "config.json"

        result = run_cli("debug", "on")
        assert result.exit_code == 0
        assert json.loads(config_file.read_text())["debug"] is True
        assert "debug.log" in result.output

        result = run_cli("debug", "off")
        assert result.exit_code == 0
        assert json.loads(config_file.read_text())["debug"] is False


class TestDemoCommand:
    """Tests for the plain-mode walkthrough."""

    def test_full_walkthrough(self):
        result = run_cli("demo", "--backend", "plain", input_text="\n".join(DEMO_INPUT) + "\n")

        assert result.exit_code == 0, result.output
        out = result.output
        assert "ACProxyCam" in out
        assert "ERROR: Printer [P1] is unreachable" in out
        assert "Note skipped" in out
        assert "ERROR: task failed [on purpose]" in out
        assert "You pressed 'k'" in out
        assert "  Name: Ada" in out
        assert "  Port: 9000" in out
        assert "  Color: Green" in out
        assert "  Printer: Kobra" in out
        assert "  Features: Snapshots, Bed mesh" in out

    def test_menu_reopens_on_last_choice(self):
        result = run_cli("demo", "-b", "plain", input_text="\n".join(DEMO_INPUT) + "\n")

        # After "Run a failing task" the next menu starts there
        assert " *2. Run a failing task" in result.output
        assert "Enter choice (0-4) [2]: " in result.output

    def test_input_closed(self):
        result = run_cli("demo", "-b", "plain", input_text="Ada\n")

        assert result.exit_code == 1

    def test_interrupt_exits_130(self, monkeypatch):
        def interrupted(ui, version):
            raise KeyboardInterrupt

        monkeypatch.setattr("consoleui.cli.demo.run_demo", interrupted)

        result = run_cli("demo", "-b", "plain")

        assert result.exit_code == 130
        assert "Interrupted" in result.output

    @pytest.mark.parametrize("backend", ["fancy", "RICHER"])
    def test_unknown_backend(self, backend):
        result = run_cli("demo", "-b", backend)

        assert result.exit_code == 1
        assert "Unknown backend" in result.output

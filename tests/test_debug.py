"""Tests for debug logging."""

from consoleui.utils.config import Config
from consoleui.utils.debug import debug, debug_select, log_error, reload_config


def enable_debug(config_dir):
    Config(config_dir).set_debug(True)
    reload_config()


def test_debug_silent_when_disabled(mock_consoleui_dir, capsys):
    debug("prompt", "hello")

    assert capsys.readouterr().err == ""
    assert not (mock_consoleui_dir / "debug.log").exists()


def test_debug_writes_log_and_stderr(mock_consoleui_dir, capsys):
    enable_debug(mock_consoleui_dir)

    debug_select("selection cancelled", title="Printer")

    err = capsys.readouterr().err
    assert "[consoleui:select]" in err
    assert "selection cancelled | title=Printer" in err
    log = (mock_consoleui_dir / "debug.log").read_text()
    assert "selection cancelled" in log


def test_debug_env_override(mock_consoleui_dir, monkeypatch, capsys):
    monkeypatch.setenv("CONSOLEUI_DEBUG", "1")
    reload_config()

    debug("status", "start")

    assert "[consoleui:status]" in capsys.readouterr().err


def test_log_error_always_logged(mock_consoleui_dir, capsys):
    log_error("cli", "input closed")

    err = capsys.readouterr().err
    assert "[consoleui:cli]" in err
    assert "ERROR: input closed" in err
    assert "input closed" in (mock_consoleui_dir / "debug.log").read_text()


def test_log_error_includes_traceback(mock_consoleui_dir, capsys):
    try:
        raise ValueError("bad value")
    except ValueError as e:
        log_error("status", "action failed", exc=e)

    err = capsys.readouterr().err
    assert "Traceback" in err
    assert "ValueError: bad value" in err


def test_missing_log_dir_still_logs_to_stderr(temp_dir, monkeypatch, capsys):
    monkeypatch.setenv("CONSOLEUI_DIR", str(temp_dir / "missing"))
    monkeypatch.setenv("CONSOLEUI_DEBUG", "1")
    reload_config()

    debug("backend", "selected backend", backend="plain")

    assert "selected backend | backend=plain" in capsys.readouterr().err
    assert not (temp_dir / "missing").exists()

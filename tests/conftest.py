"""Shared pytest fixtures."""

import io
import os
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from consoleui.utils.debug import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_consoleui_dir(temp_dir, monkeypatch):
    """Set up a mock config directory and clear CONSOLEUI_* overrides."""
    for key in list(os.environ):
        if key.startswith("CONSOLEUI_"):
            monkeypatch.delenv(key)
    config_dir = temp_dir / ".consoleui"
    config_dir.mkdir()
    monkeypatch.setenv("CONSOLEUI_DIR", str(config_dir))
    reload_config()
    yield config_dir
    reload_config()


@pytest.fixture
def console():
    """Non-terminal console that renders into a string buffer."""
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)

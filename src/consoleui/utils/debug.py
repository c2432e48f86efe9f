"""Debug logging for prompts, menus, status spinners and backend choice.

Lines look like ``[consoleui:select] 2026-01-01 12:00:00.000 message | k=v``
and go to ``debug.log`` in the config directory and to stderr.
"""

import sys
import traceback
from datetime import datetime
from typing import Optional

from consoleui.utils.config import Config

_config: Optional[Config] = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _format_line(category: str, message: str, extras: dict) -> str:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[consoleui:{category}] {timestamp} {message}"
    if extras:
        line += " | " + " ".join(f"{k}={v}" for k, v in extras.items())
    return line


def _emit(line: str):
    """Append a line to the debug log and echo it to stderr."""
    try:
        with open(_get_config().log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass  # No writable config dir; stderr still gets the line
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log a debug line when debug mode is on.

    Args:
        category: 'prompt', 'select', 'status' or 'backend'
        message: What happened
        **kwargs: key=value details appended to the line
    """
    if not _get_config().debug:
        return
    _emit(_format_line(category, message, kwargs))


def debug_prompt(message: str, **kwargs):
    debug("prompt", message, **kwargs)


def debug_select(message: str, **kwargs):
    debug("select", message, **kwargs)


def debug_status(message: str, **kwargs):
    debug("status", message, **kwargs)


def debug_backend(message: str, **kwargs):
    debug("backend", message, **kwargs)


def log_error(category: str, message: str, exc: Optional[BaseException] = None):
    """Log an error whether or not debug mode is on.

    The traceback of ``exc`` is appended when given.
    """
    line = _format_line(category, f"ERROR: {message}", {})
    if exc is not None:
        line += "\n" + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    _emit(line)

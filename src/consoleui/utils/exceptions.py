"""Custom exceptions for consoleui.

This module defines the package's own error types:
- ConsoleUIError: Base exception for all consoleui errors
- ConfigurationError: Configuration related errors

Failures raised by the terminal layer itself (rich, simple-term-menu,
questionary, readchar, the input stream) are not wrapped and reach
callers unchanged.
"""

from typing import Optional


class ConsoleUIError(Exception):
    """Base exception for all consoleui errors.

    All consoleui-specific exceptions inherit from this class, allowing
    callers to catch all consoleui errors with a single except clause.
    """

    pass


class ConfigurationError(ConsoleUIError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown backend name
    - Invalid value for a setting

    Attributes:
        setting: Name of the offending setting, if known
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(message)
        self.setting = setting

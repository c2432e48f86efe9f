"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from consoleui.utils.constants import (
    BACKENDS,
    DEFAULT_APP_NAME,
    DEFAULT_BACKEND,
    DEFAULT_COLOR_SYSTEM,
    DEFAULT_HEADER_COLOR,
    DEFAULT_SPINNER,
    ENV_PREFIX,
)
from consoleui.utils.exceptions import ConfigurationError

# Attributes that env overrides may set
SETTINGS = ("backend", "app_name", "header_color", "spinner", "color_system", "debug")


def normalize_backend(name: Optional[str]) -> str:
    """Lower-case a backend name and check it is known.

    Raises:
        ConfigurationError: If the name is not a known backend
    """
    name = (name or DEFAULT_BACKEND).strip().lower()
    if name not in BACKENDS:
        raise ConfigurationError(
            f"Unknown backend '{name}' (expected one of: {', '.join(BACKENDS)})",
            setting="backend",
        )
    return name


def get_consoleui_dir() -> Path:
    """Get the consoleui data directory (XDG-compliant)."""
    if env_dir := os.environ.get("CONSOLEUI_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "consoleui"


class Config:
    """Application configuration."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Load config from directory."""
        self.config_dir = config_dir or get_consoleui_dir()
        self._config_file = self.config_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.backend = DEFAULT_BACKEND
        self.app_name = DEFAULT_APP_NAME
        self.header_color = DEFAULT_HEADER_COLOR
        self.spinner = DEFAULT_SPINNER
        self.color_system = DEFAULT_COLOR_SYSTEM
        self.debug = False
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.backend = data.get("backend", DEFAULT_BACKEND)
                self.app_name = data.get("app_name", DEFAULT_APP_NAME)
                self.header_color = data.get("header_color", DEFAULT_HEADER_COLOR)
                self.spinner = data.get("spinner", DEFAULT_SPINNER)
                self.color_system = data.get("color_system", DEFAULT_COLOR_SYSTEM)
                self.debug = data.get("debug", False)
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell CONSOLEUI_* vars."""

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both CONSOLEUI_FOO and FOO formats in config.env
                if key.startswith(ENV_PREFIX):
                    attr_name = key[len(ENV_PREFIX) :].lower()
                else:
                    attr_name = key.lower()
                # CONSOLEUI_DIR, methods and properties are not settings
                if attr_name not in SETTINGS:
                    continue
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                else:
                    setattr(self, attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "backend": self.backend,
            "app_name": self.app_name,
            "header_color": self.header_color,
            "spinner": self.spinner,
            "color_system": self.color_system,
            "debug": self.debug,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    @property
    def config_file(self) -> Path:
        """Path to config.json."""
        return self._config_file

    @property
    def log_path(self) -> Path:
        """Path to debug log file."""
        return self.config_dir / "debug.log"

    def set_env(self, key: str, value: str):
        """Set an env var override in config."""
        self.env[key] = value
        self.save()
        # Re-apply to update attributes
        self._apply_env_overrides()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self.save()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    def set_backend(self, backend: str):
        """Set the preferred UI backend.

        Raises:
            ConfigurationError: If the name is not a known backend
        """
        self.backend = normalize_backend(backend)
        self.save()

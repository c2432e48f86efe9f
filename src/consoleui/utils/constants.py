"""Constants used throughout consoleui."""

# Backend names
BACKEND_RICH = "rich"
BACKEND_PLAIN = "plain"
BACKEND_AUTO = "auto"
BACKENDS = (BACKEND_AUTO, BACKEND_RICH, BACKEND_PLAIN)

# Defaults
DEFAULT_BACKEND = BACKEND_AUTO
DEFAULT_APP_NAME = "ACProxyCam"
DEFAULT_HEADER_COLOR = "magenta"
DEFAULT_SPINNER = "dots"
DEFAULT_COLOR_SYSTEM = "auto"

# Env var prefix for overrides (CONSOLEUI_DEBUG=1 etc)
ENV_PREFIX = "CONSOLEUI_"


class Colors:
    """Rich styles per message kind."""

    ERROR = "red"
    WARNING = "yellow"
    SUCCESS = "green"
    INFO = "grey50"
    RULE = "blue"


class Prefix:
    """Plain-mode message prefixes."""

    ERROR = "ERROR: "
    WARNING = "WARNING: "
    SUCCESS = "OK: "
    INFO = "  "


# Plain-mode separators
BANNER_LINE = "=" * 40
SEPARATOR_LINE = "-" * 40
TABLE_UNDERLINE = "-" * 60
PANEL_BORDER = "+" + "-" * 38 + "+"

# Echoed when a menu is closed without a choice
CANCELLED_TEXT = "Cancelled"

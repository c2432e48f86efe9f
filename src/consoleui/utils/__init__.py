"""Utilities for consoleui."""

from consoleui.utils.formatting import clamp_index, menu_entry, strip_markup, styled

__all__ = ["clamp_index", "menu_entry", "strip_markup", "styled"]

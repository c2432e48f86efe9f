"""Terminal menu wrapper using simple-term-menu."""

from typing import Optional, Sequence

from simple_term_menu import TerminalMenu

from consoleui.utils.formatting import clamp_index, menu_entry

MENU_STYLE = {
    "menu_cursor": "> ",
    "menu_cursor_style": ("fg_cyan", "bold"),
    "menu_highlight_style": ("fg_cyan", "bold"),
    "cycle_cursor": True,
    "clear_screen": False,
}


class TerminalMenuSelector:
    """Wrapper around simple-term-menu with Rich-like styling."""

    def select(
        self,
        options: Sequence[str],
        title: str = "",
        cursor_index: int = 0,
        cancellable: bool = True,
    ) -> Optional[int]:
        """Show selection menu.

        Args:
            options: List of option strings
            title: Optional title shown above menu
            cursor_index: Starting cursor position (clamped into range)
            cancellable: Whether escape/q close the menu without a choice

        Returns:
            Selected index or None if cancelled (escape/q/Ctrl+G)
        """
        if cancellable and not options:
            return None

        menu = TerminalMenu(
            [menu_entry(option) for option in options],
            title=title if title else None,
            cursor_index=clamp_index(cursor_index, len(options)),
            **self._exit_keys(cancellable),
            **MENU_STYLE,
        )
        return menu.show()

    def select_many(
        self,
        options: Sequence[str],
        title: str = "",
        instructions: Optional[str] = None,
    ) -> list[int]:
        """Show multi-selection menu.

        Space/Tab toggle entries, Enter accepts.

        Returns:
            Chosen indices in display order
        """
        menu = TerminalMenu(
            [menu_entry(option) for option in options],
            title=title if title else None,
            multi_select=True,
            multi_select_empty_ok=True,
            multi_select_select_on_accept=False,
            show_multi_select_hint=True,
            show_multi_select_hint_text=instructions,
            **self._exit_keys(False),
            **MENU_STYLE,
        )
        menu.show()
        return sorted(menu.chosen_menu_indices or ())

    @staticmethod
    def _exit_keys(cancellable: bool) -> dict:
        """Keyword args controlling how a menu may be left."""
        if cancellable:
            return {}
        # No quit keys; Ctrl+C raises KeyboardInterrupt instead of returning None
        return {"quit_keys": (), "raise_error_on_interrupt": True}

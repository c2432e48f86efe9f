"""Walkthrough of every console primitive."""

import asyncio

from rich.markup import escape

from consoleui.base import ConsoleUI

COLORS = ["Red", "Green", "Blue", "Cyan | Teal"]
FEATURES = ["Snapshots", "MJPEG stream", "LED control", "[bold]Bed mesh[/bold]"]

ACTION_TASK = "Run a slow task"
ACTION_FAIL = "Run a failing task"
ACTION_KEY = "Read a key"
ACTION_DONE = "Done"
ACTIONS = [ACTION_TASK, ACTION_FAIL, ACTION_KEY, ACTION_DONE]


async def _slow_task(seconds: float = 1.0) -> str:
    await asyncio.sleep(seconds)
    return "finished"


async def _failing_task() -> None:
    await asyncio.sleep(0.2)
    raise RuntimeError("task failed [on purpose]")


def show_output(ui: ConsoleUI, version: str) -> None:
    """Render every output primitive once."""
    ui.clear()
    ui.write_header(version)

    ui.write_rule("Output")
    ui.write_line("Plain text keeps [brackets] as typed")
    ui.write_markup("[bold]Markup[/bold] is rendered as [cyan]styles[/cyan]")
    ui.write_success("Service is running")
    ui.write_info("Muted detail for [context]")
    ui.write_warning("Camera stream is paused")
    ui.write_error("Printer [P1] is unreachable")
    ui.write_panel("[bold]Status:[/bold] [green]running[/green]  [dim]2 printers[/dim]")
    ui.write_table(
        ["Name", "Status", "Port"],
        [
            ["Kobra", "[green]running[/green]", "8080"],
            ["Vyper", "[yellow]paused[/yellow]", "8081"],
        ],
    )
    ui.write_grid([("Version", version), ("Backend", type(ui).__name__)])
    ui.write_line()


def run_menu(ui: ConsoleUI) -> None:
    """Action menu that reopens on the last choice until Done or Escape."""
    last_index = 0
    while True:
        choice, index = ui.select_one_with_escape_and_index("Select action:", ACTIONS, last_index)
        if choice is None or choice == ACTION_DONE:
            return
        last_index = index

        if choice == ACTION_TASK:
            result = asyncio.run(ui.with_status("Working...", _slow_task))
            ui.write_success(f"Task {result}")
        elif choice == ACTION_FAIL:
            try:
                asyncio.run(ui.with_status("Working...", _failing_task))
            except RuntimeError as e:
                ui.write_error(str(e))
        elif choice == ACTION_KEY:
            ui.write_info("Press any key")
            key = ui.read_key()
            ui.write_info(f"You pressed {key!r}")


def run_demo(ui: ConsoleUI, version: str) -> None:
    """Drive every ConsoleUI operation once."""
    show_output(ui, version)

    ui.write_rule("Input")
    name = ui.ask("Your name", default="operator")
    port = ui.ask_int("Port", 8080)
    token = ui.ask_secret("Access token", default="")
    note = ui.ask_optional("Note")
    if note.cancelled:
        ui.write_info("Note skipped")
    elif note.empty:
        ui.write_info("No note")

    ui.write_rule("Selection")
    color = ui.select_one("Favourite color:", COLORS)
    printer = ui.select_one_with_escape("Select printer:", ["Kobra", "Vyper"])
    features = ui.select_many(
        "Enable features:",
        FEATURES,
        instructions="(Space to toggle, Enter to accept)",
    )
    run_menu(ui)

    ui.write_rule()
    if ui.confirm("Show summary?", default=True):
        ui.write_grid(
            [
                ("Name", escape(name)),
                ("Port", str(port)),
                ("Token", "set" if token else "not set"),
                ("Note", escape(note.value) if note.value else "-"),
                ("Color", color),
                ("Printer", printer or "-"),
                ("Features", ", ".join(features) or "-"),
            ]
        )
    ui.wait_for_key("Press any key to finish...")

"""CLI command handlers."""

import typer
from rich.console import Console

from consoleui.utils.config import Config, get_consoleui_dir
from consoleui.utils.debug import log_error, reload_config
from consoleui.utils.exceptions import ConsoleUIError

console = Console()


def _get_version() -> str:
    from consoleui import __version__

    return __version__


def cmd_status(args):
    """Show current status."""
    from consoleui.factory import resolve_backend

    config_dir = get_consoleui_dir()
    config = Config(config_dir)

    try:
        active = resolve_backend(config.backend)
    except ConsoleUIError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold]consoleui[/bold] {_get_version()}")
    console.print(f"[bold]Backend:[/bold] [cyan]{config.backend}[/cyan] [dim](using {active})[/dim]")

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    console.print(f"[bold]App name:[/bold] {config.app_name}")
    console.print(f"[bold]Config:[/bold] [dim]{config_dir}[/dim]")


def cmd_version(args):
    """Print version."""
    console.print(f"consoleui {_get_version()}", markup=False, highlight=False)


def cmd_demo(args):
    """Run the interactive walkthrough."""
    from consoleui.cli.demo import run_demo
    from consoleui.factory import create_console_ui

    config = Config(get_consoleui_dir())
    try:
        ui = create_console_ui(config, backend=args.backend)
    except ConsoleUIError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        run_demo(ui, _get_version())
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        raise typer.Exit(130)
    except EOFError:
        log_error("cli", "input closed during demo")
        raise typer.Exit(1)


def cmd_backend(args):
    """Set preferred backend."""
    config = Config(get_consoleui_dir())
    try:
        config.set_backend(args.name)
    except ConsoleUIError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"Backend set to [cyan]{config.backend}[/cyan]")


def cmd_debug_on(args):
    """Enable debug mode."""
    config = Config(get_consoleui_dir())
    config.set_debug(True)
    reload_config()
    console.print(f"Debug mode [green]enabled[/green]. Logs: {config.log_path}")


def cmd_debug_off(args):
    """Disable debug mode."""
    config = Config(get_consoleui_dir())
    config.set_debug(False)
    reload_config()
    console.print("Debug mode [yellow]disabled[/yellow]")

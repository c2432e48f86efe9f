"""CLI entry point for consoleui.

Uses Typer for command routing with lazy loading for performance.
"""

from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="consoleui",
    help="Terminal UI toolkit with rich and plain backends",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Show status if no command given."""
    if ctx.invoked_subcommand is None:
        from consoleui.cli.commands import cmd_status

        cmd_status(None)


@app.command()
def status() -> None:
    """Show current status."""
    from consoleui.cli.commands import cmd_status

    cmd_status(None)


@app.command()
def version() -> None:
    """Show version information."""
    from consoleui.cli.commands import cmd_version

    cmd_version(None)


@app.command()
def demo(
    backend: Optional[str] = typer.Option(
        None,
        "--backend",
        "-b",
        help="rich, plain or auto. Omit to use the configured backend.",
    ),
) -> None:
    """Walk through every console primitive."""
    from consoleui.cli.commands import cmd_demo

    class Args:
        def __init__(self):
            self.backend = backend

    cmd_demo(Args())


@app.command("backend")
def set_backend(name: str) -> None:
    """Set the preferred backend (rich, plain, auto)."""
    from consoleui.cli.commands import cmd_backend

    class Args:
        def __init__(self):
            self.name = name

    cmd_backend(Args())


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from consoleui.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from consoleui.cli.commands import cmd_debug_off

    cmd_debug_off(None)


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()

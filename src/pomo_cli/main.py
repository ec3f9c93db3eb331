"""Main entry point for pomo CLI."""

import typer

from pomo_cli import __version__
from pomo_cli.commands import config, timer
from pomo_cli.services.config_service import get_config_service
from pomo_cli.utils.logger import enable_console_logging
from pomo_cli.utils.ui.console import get_console, set_color

app = typer.Typer(
    name="pomo",
    help="A command-line Pomodoro timer for focused work and rest intervals",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(timer.app, name="timer", help="Pomodoro timer for focus sessions")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Also print log messages to the terminal"
    ),
) -> None:
    """Apply global options before any command runs."""
    if verbose:
        enable_console_logging()
    set_color(get_config_service().config.output.color)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]pomo CLI[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

"""Configuration management commands."""

from datetime import timedelta
from typing import Any, Optional

import typer

from pomo_cli.services.config_service import get_config_service
from pomo_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomo_cli.utils.ui.console import get_console
from pomo_cli.utils.ui.formatters import (
    format_duration,
    format_error,
    format_output,
    format_success,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()

# Keys holding durations; plain numbers are read in these units
_DURATION_UNITS = {
    "intervals.work": "minutes",
    "intervals.short_rest": "minutes",
    "intervals.long_rest": "minutes",
    "intervals.tick": "seconds",
}


def parse_value(key: str, value: str) -> Any:
    """Convert a command-line string into the type the key expects."""
    unit = _DURATION_UNITS.get(key)
    if unit is not None:
        try:
            return timedelta(**{unit: float(value)})
        except ValueError:
            raise AppError(
                f"'{key}' expects a number of {unit}, got '{value}'",
                exit_code=ERROR_INVALID_ARGS,
            ) from None

    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    return value


def _display(value: Any) -> Any:
    if isinstance(value, timedelta):
        return format_duration(value)
    return value


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option(
        "table", "--output", "-o", help="Output format (table, json, yaml)"
    ),
) -> None:
    """Show the current configuration."""
    config = get_config_service().config
    if output == "table":
        data = config.model_dump()
        data["intervals"] = {k: _display(v) for k, v in data["intervals"].items()}
        format_output(data, output)
    else:
        format_output(config.model_dump(mode="json"), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., intervals.work)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        )
    console.print(_display(value))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., intervals.work)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value. Durations take minutes (tick: seconds)."""
    parsed_value = parse_value(key, value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from None
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{_display(parsed_value)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError:
        raise AppError(
            f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS
        ) from None

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")

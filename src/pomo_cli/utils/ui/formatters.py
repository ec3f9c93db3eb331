"""Output formatters for intervals and configuration."""

import json
from datetime import timedelta
from typing import Any

import yaml
from rich.table import Table

from pomo_cli.models import Interval

from .console import get_console

console = get_console()

CATEGORY_LABELS = {
    "work": "🍅 Work",
    "short_rest": "☕ Short rest",
    "long_rest": "🌴 Long rest",
}

STATE_COLORS = {
    "not_started": "dim",
    "running": "cyan",
    "paused": "yellow",
    "done": "green",
    "cancelled": "red",
}


def format_output(data: dict, output_format: str = "table") -> None:
    """Format a plain dictionary as table, json or yaml."""
    if output_format == "json":
        console.print_json(json.dumps(data, default=str))
    elif output_format == "yaml":
        console.print(yaml.safe_dump(data, sort_keys=False).rstrip())
    else:
        format_single_item(data)


def format_single_item(item: dict, prefix: str = "") -> None:
    """Print nested keys as dotted ``key: value`` lines."""
    for key, value in item.items():
        if isinstance(value, dict):
            format_single_item(value, prefix=f"{prefix}{key}.")
        else:
            console.print(f"[cyan]{prefix}{key}[/cyan]: {value}")


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_duration(value: timedelta) -> str:
    """Render a duration as MM:SS (or H:MM:SS past an hour)."""
    total = max(0, int(value.total_seconds()))
    hours, rest = divmod(total, 3600)
    mins, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{mins:02d}:{secs:02d}"
    return f"{mins:02d}:{secs:02d}"


def format_category(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def get_progress_bar(percentage: float, width: int = 20) -> str:
    """Get a progress bar representation."""
    percentage = min(100.0, max(0.0, percentage))
    filled = int(width * percentage / 100)
    return "▓" * filled + "░" * (width - filled)


def format_history_table(intervals: list[Interval]) -> None:
    """Print intervals as a table, oldest first."""
    if not intervals:
        console.print("[yellow]No intervals recorded[/yellow]")
        return

    table = Table(title="Session summary")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Category")
    table.add_column("Planned", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("State")

    for interval in sorted(intervals, key=lambda i: i.id):
        color = STATE_COLORS.get(interval.state, "white")
        table.add_row(
            str(interval.id),
            format_category(interval.category),
            format_duration(interval.planned_duration),
            format_duration(interval.actual_duration),
            f"[{color}]{interval.state}[/{color}]",
        )

    totals = interval_summary(intervals)
    table.caption = (
        f"{totals['completed']}/{totals['intervals']} completed, "
        f"work {totals['work']}, rest {totals['rest']}"
    )
    console.print(table)


def interval_summary(intervals: list[Interval]) -> dict[str, Any]:
    """Totals of completed work and rest time."""
    work = sum(
        (i.actual_duration for i in intervals if i.category == "work"),
        timedelta(0),
    )
    rest = sum(
        (i.actual_duration for i in intervals if i.is_rest),
        timedelta(0),
    )
    return {
        "intervals": len(intervals),
        "completed": sum(1 for i in intervals if i.state == "done"),
        "work": format_duration(work),
        "rest": format_duration(rest),
    }

"""Pomodoro timer commands for pomo CLI."""

import asyncio
import signal
from datetime import timedelta

import typer
from rich.table import Table

from pomo_cli.adapters.memory import InMemoryIntervalRepository
from pomo_cli.models import Interval, IntervalConfig
from pomo_cli.repositories import IntervalRepository
from pomo_cli.services import IntervalService, SessionController
from pomo_cli.services.config_service import get_config_service
from pomo_cli.ui.timer_display import TimerDisplay
from pomo_cli.utils.exit_codes import CANCELLED
from pomo_cli.utils.logger import get_logger
from pomo_cli.utils.ui.console import get_console
from pomo_cli.utils.ui.formatters import (
    format_category,
    format_duration,
    format_history_table,
    format_output,
)

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Pomodoro timer for focus sessions")


def get_interval_repository() -> IntervalRepository:
    """Interval store used by the timer commands."""
    return InMemoryIntervalRepository()


def _minutes(value: float) -> timedelta | None:
    return timedelta(minutes=value) if value else None


def _load_interval_config(
    work: float, short_rest: float, long_rest: float
) -> IntervalConfig:
    return get_config_service().interval_config(
        work=_minutes(work),
        short_rest=_minutes(short_rest),
        long_rest=_minutes(long_rest),
    )


def _install_interrupt_handler(cancel: asyncio.Event) -> bool:
    """Route Ctrl+C to the cancel event. False when the platform cannot."""
    try:
        asyncio.get_running_loop().add_signal_handler(signal.SIGINT, cancel.set)
    except (NotImplementedError, RuntimeError, ValueError):
        # Ctrl+C then cancels the task, which the tick engine records too
        return False
    return True


def _remove_interrupt_handler() -> None:
    asyncio.get_running_loop().remove_signal_handler(signal.SIGINT)


@app.command("run")
@command_wrapper
async def run_intervals(
    cycles: int = typer.Option(
        1, "--cycles", "-n", min=1, help="Number of intervals to run back to back"
    ),
    work: float = typer.Option(0, "--work", help="Work duration in minutes"),
    short_rest: float = typer.Option(
        0, "--short-rest", help="Short rest duration in minutes"
    ),
    long_rest: float = typer.Option(
        0, "--long-rest", help="Long rest duration in minutes"
    ),
    summary: bool = typer.Option(
        True, "--summary/--no-summary", help="Show the session summary at the end"
    ),
):
    """Run work and rest intervals; Ctrl+C cancels the current one."""
    logger = get_logger("timer")
    config = _load_interval_config(work, short_rest, long_rest)
    output = get_config_service().config.output

    repository = get_interval_repository()
    intervals = IntervalService(repository)
    controller = SessionController(repository)
    display = TimerDisplay(console, show_progress=output.progress_bar)

    cancel = asyncio.Event()
    handler_installed = _install_interrupt_handler(cancel)

    result: Interval | None = None
    try:
        for _ in range(cycles):
            interval = await intervals.resolve_current(config)
            logger.info(
                "starting interval %d (%s, %s)",
                interval.id,
                interval.category,
                interval.planned_duration,
            )
            result = await controller.start(
                interval,
                config,
                display.on_start,
                display.on_tick,
                display.on_end,
                cancel=cancel,
            )
            display.finish(result)
            logger.info("interval %d finished as %s", result.id, result.state)
            if result.state != "done":
                break
    finally:
        if handler_installed:
            _remove_interrupt_handler()

    if summary:
        format_history_table(await intervals.history())

    if result is not None and result.state == "cancelled":
        raise typer.Exit(CANCELLED)


@app.command("plan")
@command_wrapper
async def plan_intervals(
    cycles: int = typer.Option(
        8, "--cycles", "-n", min=1, help="Number of intervals to preview"
    ),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
):
    """Preview the interval sequence, assuming each interval completes."""
    config = _load_interval_config(0, 0, 0)
    repository = InMemoryIntervalRepository()
    intervals = IntervalService(repository)

    planned: list[Interval] = []
    for _ in range(cycles):
        interval = await intervals.create_next(config)
        interval.actual_duration = interval.planned_duration
        interval.state = "done"
        await repository.update(interval)
        planned.append(interval)

    if output in ("json", "yaml"):
        format_output(
            {
                "intervals": [
                    {
                        "category": i.category,
                        "minutes": i.planned_duration.total_seconds() / 60,
                    }
                    for i in planned
                ]
            },
            output,
        )
        return

    table = Table(title="Upcoming intervals")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Category")
    table.add_column("Duration", justify="right")
    for interval in planned:
        table.add_row(
            str(interval.id),
            format_category(interval.category),
            format_duration(interval.planned_duration),
        )
    console.print(table)


@app.command("next")
@command_wrapper
async def next_interval():
    """Show the first interval a fresh run starts with.

    Each run keeps its intervals in memory only, so this is always the
    opening work interval; use `plan` to see the sequence that follows.
    """
    config = _load_interval_config(0, 0, 0)
    intervals = IntervalService(get_interval_repository())
    category = await intervals.next_category()
    console.print(
        f"Next: [bold]{format_category(category)}[/bold] "
        f"({format_duration(config.duration_for(category))})"
    )

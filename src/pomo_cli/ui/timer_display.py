"""Live countdown display for running intervals."""

from __future__ import annotations

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from pomo_cli.models import Interval
from pomo_cli.utils.ui.formatters import (
    format_category,
    format_duration,
    get_progress_bar,
)


class TimerDisplay:
    """Renders a running interval through the tick engine callbacks.

    Pass ``on_start``, ``on_tick`` and ``on_end`` straight to
    ``SessionController.start`` and call ``finish`` once it returns.
    """

    def __init__(self, console: Console | None = None, show_progress: bool = True):
        self.console = console or Console()
        self.show_progress = show_progress
        self._live: Live | None = None

    def render(self, interval: Interval) -> Group:
        """Countdown line plus progress bar for one interval snapshot."""
        remaining = interval.remaining
        planned = interval.planned_duration.total_seconds()
        elapsed = interval.actual_duration.total_seconds()
        progress_pct = min(100, int(elapsed / planned * 100)) if planned > 0 else 0

        if remaining.total_seconds() < 60:
            timer_color = "red"
        elif remaining.total_seconds() < 300:
            timer_color = "yellow"
        else:
            timer_color = "cyan"

        header = Text(f"{format_category(interval.category)} #{interval.id}  ")
        header.append(format_duration(remaining), style=f"bold {timer_color}")

        components = [header]
        if self.show_progress:
            components.append(
                Text(f"{get_progress_bar(progress_pct)}  {progress_pct}%", style="dim")
            )
        return Group(*components)

    def on_start(self, interval: Interval) -> None:
        self._stop_live()
        self._live = Live(
            self.render(interval),
            console=self.console,
            refresh_per_second=4,
            transient=True,
        )
        self._live.start()

    def on_tick(self, interval: Interval) -> None:
        if self._live is not None:
            self._live.update(self.render(interval))

    def on_end(self, interval: Interval) -> None:
        self._stop_live()
        self.console.print(
            Panel(
                f"[bold green]🎉 {format_category(interval.category)} complete![/bold green]\n"
                f"Duration: {format_duration(interval.actual_duration)}",
                border_style="green",
                padding=(0, 2),
            )
        )

    def finish(self, interval: Interval) -> None:
        """Close the live view and report how the interval stopped."""
        self._stop_live()
        if interval.state == "cancelled":
            self.console.print(
                Panel(
                    f"[yellow]{format_category(interval.category)} cancelled[/yellow]\n"
                    f"Elapsed: {format_duration(interval.actual_duration)}  "
                    f"Remaining: {format_duration(interval.remaining)}",
                    border_style="yellow",
                    padding=(0, 2),
                )
            )
        elif interval.state == "paused":
            self.console.print(
                f"[yellow]⏸ Paused with {format_duration(interval.remaining)} left[/yellow]"
            )

    def _stop_live(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

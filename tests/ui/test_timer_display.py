"""Tests for the live timer display and interval formatters."""

from __future__ import annotations

from datetime import timedelta
from io import StringIO

from rich.console import Console

from pomo_cli.models import Interval
from pomo_cli.ui.timer_display import TimerDisplay
from pomo_cli.utils.ui.formatters import (
    format_duration,
    get_progress_bar,
    interval_summary,
)


def make_display(show_progress=True):
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, width=80)
    return TimerDisplay(console=console, show_progress=show_progress), buffer


def make_interval(**kwargs):
    defaults = {
        "id": 1,
        "category": "work",
        "planned_duration": timedelta(minutes=25),
        "actual_duration": timedelta(minutes=5),
    }
    defaults.update(kwargs)
    return Interval(**defaults)


class TestFormatters:
    def test_format_duration(self):
        assert format_duration(timedelta(minutes=25)) == "25:00"
        assert format_duration(timedelta(seconds=65)) == "01:05"
        assert format_duration(timedelta(hours=1, minutes=2, seconds=3)) == "1:02:03"

    def test_progress_bar_clamped(self):
        assert get_progress_bar(0, width=4) == "░░░░"
        assert get_progress_bar(150, width=4) == "▓▓▓▓"
        assert get_progress_bar(50, width=4) == "▓▓░░"

    def test_interval_summary_totals(self):
        intervals = [
            make_interval(id=1, state="done", actual_duration=timedelta(minutes=25)),
            make_interval(
                id=2,
                category="short_rest",
                state="done",
                planned_duration=timedelta(minutes=5),
                actual_duration=timedelta(minutes=5),
            ),
            make_interval(id=3, state="cancelled", actual_duration=timedelta(minutes=10)),
        ]

        totals = interval_summary(intervals)

        assert totals == {
            "intervals": 3,
            "completed": 2,
            "work": "35:00",
            "rest": "05:00",
        }


class TestTimerDisplay:
    def test_render_shows_remaining_and_progress(self):
        display, _ = make_display()
        console = Console(file=StringIO(), width=80)

        with console.capture() as capture:
            console.print(display.render(make_interval()))

        text = capture.get()
        assert "20:00" in text
        assert "20%" in text

    def test_render_without_progress(self):
        display, _ = make_display(show_progress=False)
        console = Console(file=StringIO(), width=80)

        with console.capture() as capture:
            console.print(display.render(make_interval()))

        assert "%" not in capture.get()

    def test_on_end_prints_completion(self):
        display, buffer = make_display()
        interval = make_interval(state="done", actual_duration=timedelta(minutes=25))

        display.on_start(interval)
        display.on_tick(interval)
        display.on_end(interval)

        assert "Work complete!" in buffer.getvalue()

    def test_finish_reports_cancel(self):
        display, buffer = make_display()
        interval = make_interval(state="cancelled")

        display.on_start(interval)
        display.finish(interval)

        output = buffer.getvalue()
        assert "cancelled" in output
        assert "Remaining: 20:00" in output

    def test_finish_reports_pause(self):
        display, buffer = make_display()

        display.finish(make_interval(state="paused"))

        assert "Paused with 20:00 left" in buffer.getvalue()

    def test_on_tick_before_start_is_ignored(self):
        display, buffer = make_display()

        display.on_tick(make_interval())

        assert buffer.getvalue() == ""

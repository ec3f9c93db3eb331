"""Console utilities for pomo CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight)


def set_color(enabled: bool) -> None:
    """Turn colored output on or off for the shared console."""
    get_console().no_color = not enabled

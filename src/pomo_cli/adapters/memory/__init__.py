"""In-memory adapter module - Process-local interval storage."""

from pomo_cli.adapters.memory.interval_repository import InMemoryIntervalRepository

__all__ = [
    "InMemoryIntervalRepository",
]

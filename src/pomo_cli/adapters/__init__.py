"""Adapters module - Repository implementations for different storage backends.

This package contains concrete implementations (adapters) for the repository interfaces:
- memory: In-process storage guarded by an asyncio lock
"""

from .memory import InMemoryIntervalRepository

__all__ = [
    "InMemoryIntervalRepository",
]

"""Repository interfaces for the pomo CLI.

This package contains the abstract base class that defines the contract
for interval persistence. This is the "Port" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- pomo_cli.adapters.memory (in-process storage)
"""

from .repository import IntervalRepository

__all__ = [
    "IntervalRepository",
]

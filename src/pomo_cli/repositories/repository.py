"""Repository abstraction layer for pomo CLI.

This module defines the abstract base class (interface) for interval storage,
following the hexagonal architecture (Ports & Adapters) pattern.

The interval logic only talks to this port, so the in-memory adapter can be
swapped for a durable one without touching the timer code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pomo_cli.models import Interval


class IntervalRepository(ABC):
    """Abstract base class for interval persistence operations.

    Implementations must serialize concurrent reads and updates of a record.
    """

    @abstractmethod
    async def create(self, interval: Interval) -> int:
        """Persist a new interval.

        Args:
            interval: Interval to store (its id is ignored)

        Returns:
            The positive ID assigned to the interval
        """
        raise NotImplementedError(
            "IntervalRepository.create() must be implemented by adapter"
        )

    @abstractmethod
    async def update(self, interval: Interval) -> None:
        """Replace the stored record with the same ID.

        Args:
            interval: Interval carrying the new values

        Raises:
            InvalidIDError: If the interval ID is zero or negative
            NotFoundError: If no interval has that ID
        """
        raise NotImplementedError(
            "IntervalRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def by_id(self, interval_id: int) -> Interval:
        """Get a specific interval by ID.

        Raises:
            InvalidIDError: If the ID is zero or negative
            NotFoundError: If no interval has that ID
        """
        raise NotImplementedError(
            "IntervalRepository.by_id() must be implemented by adapter"
        )

    @abstractmethod
    async def last(self) -> Interval:
        """Get the most recently created interval.

        Raises:
            NoIntervalsError: If the store is empty
        """
        raise NotImplementedError(
            "IntervalRepository.last() must be implemented by adapter"
        )

    @abstractmethod
    async def breaks(self, n: int) -> list[Interval]:
        """Get up to ``n`` most recent rest intervals, newest first."""
        raise NotImplementedError(
            "IntervalRepository.breaks() must be implemented by adapter"
        )

    @abstractmethod
    async def history(self, limit: int | None = None) -> list[Interval]:
        """Get stored intervals newest first, optionally capped at ``limit``."""
        raise NotImplementedError(
            "IntervalRepository.history() must be implemented by adapter"
        )

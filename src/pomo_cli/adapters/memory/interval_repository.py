"""In-memory implementation of IntervalRepository."""

from __future__ import annotations

import asyncio

from pomo_cli.models import (
    Interval,
    InvalidIDError,
    NoIntervalsError,
    NotFoundError,
)
from pomo_cli.repositories import IntervalRepository


class InMemoryIntervalRepository(IntervalRepository):
    """Interval store kept in a Python list.

    IDs are 1-based positions in the list. Records are copied on the way in
    and on the way out, so callers never share state with the store.
    """

    def __init__(self):
        self._intervals: list[Interval] = []
        self._lock = asyncio.Lock()

    async def create(self, interval: Interval) -> int:
        """Store a copy of the interval and return its new ID."""
        async with self._lock:
            interval_id = len(self._intervals) + 1
            self._intervals.append(interval.model_copy(update={"id": interval_id}))
            return interval_id

    async def update(self, interval: Interval) -> None:
        """Replace the stored interval with the same ID."""
        async with self._lock:
            index = self._index(interval.id)
            self._intervals[index] = interval.model_copy()

    async def by_id(self, interval_id: int) -> Interval:
        """Return a copy of the interval with the given ID."""
        async with self._lock:
            return self._intervals[self._index(interval_id)].model_copy()

    async def last(self) -> Interval:
        """Return a copy of the most recently created interval."""
        async with self._lock:
            if not self._intervals:
                raise NoIntervalsError()
            return self._intervals[-1].model_copy()

    async def breaks(self, n: int) -> list[Interval]:
        """Return up to n most recent rest intervals, newest first."""
        async with self._lock:
            data: list[Interval] = []
            if n <= 0:
                return data
            for interval in reversed(self._intervals):
                if not interval.is_rest:
                    continue
                data.append(interval.model_copy())
                if len(data) == n:
                    break
            return data

    async def history(self, limit: int | None = None) -> list[Interval]:
        """Return stored intervals newest first."""
        async with self._lock:
            newest_first = [i.model_copy() for i in reversed(self._intervals)]
            if limit is not None:
                return newest_first[:limit]
            return newest_first

    def _index(self, interval_id: int) -> int:
        """Translate an ID into a list index. Caller must hold the lock."""
        if not isinstance(interval_id, int) or interval_id <= 0:
            raise InvalidIDError(interval_id)
        if interval_id > len(self._intervals):
            raise NotFoundError(interval_id)
        return interval_id - 1

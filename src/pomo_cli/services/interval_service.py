"""Interval service - Picking and creating the next interval.

This service layer sits between commands and the interval repository. It
decides which category comes next and resumes unfinished intervals instead
of creating duplicates.
"""

from __future__ import annotations

from pomo_cli.models import (
    Category,
    Interval,
    IntervalConfig,
    NoIntervalsError,
    choose_category,
)
from pomo_cli.models.sequencer import BREAKS_WINDOW
from pomo_cli.repositories import IntervalRepository


async def next_category(repository: IntervalRepository) -> Category:
    """Determine the category of the next interval from stored history.

    An empty store is the base case and yields "work". Any other store
    failure propagates unchanged.
    """
    try:
        last = await repository.last()
    except NoIntervalsError:
        return choose_category(None, [])

    if last.is_rest:
        return choose_category(last, [])

    breaks = await repository.breaks(BREAKS_WINDOW)
    return choose_category(last, breaks)


class IntervalService:
    """Service for interval creation and resumption."""

    def __init__(self, interval_repository: IntervalRepository):
        """Initialize the interval service.

        Args:
            interval_repository: IntervalRepository implementation for data access
        """
        self.repository = interval_repository

    async def next_category(self) -> Category:
        return await next_category(self.repository)

    async def create_next(self, config: IntervalConfig) -> Interval:
        """Create and persist the next interval.

        Args:
            config: Planned durations to draw from

        Returns:
            The stored interval, with its assigned ID
        """
        category = await next_category(self.repository)
        interval = Interval(
            category=category,
            planned_duration=config.duration_for(category),
        )
        interval.id = await self.repository.create(interval)
        return interval

    async def resolve_current(self, config: IntervalConfig) -> Interval:
        """Return the last interval if it can still run, else create a new one.

        Calling this again after a restart resumes the same record.
        """
        try:
            last = await self.repository.last()
        except NoIntervalsError:
            return await self.create_next(config)

        if not last.is_finished:
            return last

        return await self.create_next(config)

    async def history(self, limit: int | None = None) -> list[Interval]:
        """List stored intervals, newest first."""
        return await self.repository.history(limit)

"""Tick engine - Drives a running interval forward in real time."""

from __future__ import annotations

import asyncio
from datetime import timedelta

from pomo_cli.models import Callback, Interval, IntervalConfig
from pomo_cli.models.interval import STATE_CANCELLED, STATE_DONE, STATE_PAUSED
from pomo_cli.repositories import IntervalRepository


def _noop(interval: Interval) -> None:
    pass


class TickEngine:
    """Advances one running interval until it is done, cancelled or paused.

    Each step races the next timer deadline against the cancellation event.
    The timer deadline is either the next tick or the expiry of the time
    that was remaining on entry, whichever is earlier. Tick deadlines sit on
    fixed multiples of the tick unit from entry, so they do not drift; a tick
    due at the same instant as expiry is processed first.
    """

    def __init__(self, interval_repository: IntervalRepository):
        """Initialize the tick engine.

        Args:
            interval_repository: Store that holds the interval being run
        """
        self.repository = interval_repository

    async def run(
        self,
        cancel: asyncio.Event | None,
        interval_id: int,
        config: IntervalConfig,
        on_start: Callback | None = None,
        on_tick: Callback | None = None,
        on_end: Callback | None = None,
    ) -> Interval:
        """Run the interval until a terminal event.

        Args:
            cancel: Event the caller sets to cancel the interval early
            interval_id: ID of an interval already marked running
            config: Supplies the tick unit
            on_start: Called once with the interval before the first wait
            on_tick: Called after every persisted tick
            on_end: Called when the interval reaches its planned duration

        Returns:
            The last interval snapshot read or written

        Raises:
            PomodoroError: Any store failure, unchanged
        """
        cancel = cancel or asyncio.Event()
        on_start = on_start or _noop
        on_tick = on_tick or _noop
        on_end = on_end or _noop

        loop = asyncio.get_running_loop()
        entered = loop.time()

        interval = await self.repository.by_id(interval_id)
        remaining = interval.planned_duration - interval.actual_duration
        on_start(interval)

        ticks = 0
        try:
            while True:
                if cancel.is_set():
                    return await self._cancel(interval_id)

                next_tick = config.tick * (ticks + 1)
                expiring = next_tick > remaining
                offset = remaining if expiring else next_tick

                if await self._wait(cancel, entered, offset):
                    return await self._cancel(interval_id)

                if expiring:
                    return await self._expire(interval_id, on_end)

                ticks += 1
                interval = await self.repository.by_id(interval_id)
                if interval.state == STATE_PAUSED:
                    return interval

                interval.actual_duration += config.tick
                await self.repository.update(interval)
                on_tick(interval)
        except asyncio.CancelledError:
            # The owning task was cancelled: record it like a cancel signal
            await self._cancel(interval_id)
            raise

    @staticmethod
    async def _wait(cancel: asyncio.Event, entered: float, offset: timedelta) -> bool:
        """Wait until entry time plus offset. True if cancel was set first."""
        timeout = entered + offset.total_seconds() - asyncio.get_running_loop().time()
        try:
            await asyncio.wait_for(cancel.wait(), timeout=max(0.0, timeout))
        except asyncio.TimeoutError:
            return False
        return True

    async def _expire(self, interval_id: int, on_end: Callback) -> Interval:
        interval = await self.repository.by_id(interval_id)
        interval.state = STATE_DONE
        on_end(interval)
        await self.repository.update(interval)
        return interval

    async def _cancel(self, interval_id: int) -> Interval:
        interval = await self.repository.by_id(interval_id)
        interval.state = STATE_CANCELLED
        await self.repository.update(interval)
        return interval

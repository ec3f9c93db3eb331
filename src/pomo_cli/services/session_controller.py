"""Session controller - The interval state machine.

Start and pause are the only transitions callers drive directly; the tick
engine owns the transitions to done and cancelled.

    not_started --start--> running --pause--> paused --start--> running
    running --expiry--> done
    running --cancel--> cancelled
"""

from __future__ import annotations

import asyncio
from datetime import datetime

from pomo_cli.models import (
    Callback,
    Interval,
    IntervalCompletedError,
    IntervalConfig,
    IntervalNotRunningError,
    InvalidStateError,
)
from pomo_cli.models.interval import (
    STATE_NOT_STARTED,
    STATE_PAUSED,
    STATE_RUNNING,
    TERMINAL_STATES,
)
from pomo_cli.repositories import IntervalRepository
from pomo_cli.services.tick_engine import TickEngine


class SessionController:
    """Starts and pauses intervals.

    Both operations act on the stored record for the given interval, so a
    stale snapshot held by the caller never rolls back elapsed time.
    """

    def __init__(
        self,
        interval_repository: IntervalRepository,
        tick_engine: TickEngine | None = None,
    ):
        """Initialize the session controller.

        Args:
            interval_repository: IntervalRepository implementation for data access
            tick_engine: Engine used to run started intervals
        """
        self.repository = interval_repository
        self.engine = tick_engine or TickEngine(interval_repository)

    async def start(
        self,
        interval: Interval,
        config: IntervalConfig,
        on_start: Callback | None = None,
        on_tick: Callback | None = None,
        on_end: Callback | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Interval:
        """Start or resume an interval and run it to its next stop.

        Returns once the interval is done, cancelled or observed paused.
        Starting an interval that is already running is a no-op.

        Only one engine should drive an interval at a time. Resuming a paused
        interval before its previous run has returned starts a second engine
        and both keep advancing `actual_duration`; await the earlier `start`
        first.

        Args:
            interval: Interval to start (looked up by its ID)
            config: Supplies the tick unit
            on_start: Called when the timer begins running
            on_tick: Called after each tick
            on_end: Called when the interval completes
            cancel: Event the caller sets to cancel the interval

        Returns:
            The last interval snapshot

        Raises:
            IntervalCompletedError: If the interval is done or cancelled
            InvalidStateError: If the stored state is not recognized
        """
        current = await self.repository.by_id(interval.id)

        if current.state == STATE_RUNNING:
            return current
        if current.state in TERMINAL_STATES:
            raise IntervalCompletedError(current.id, current.state)
        if current.state == STATE_NOT_STARTED:
            current.start_time = datetime.now().astimezone()
        elif current.state != STATE_PAUSED:
            raise InvalidStateError(current.id, current.state)

        current.state = STATE_RUNNING
        await self.repository.update(current)

        return await self.engine.run(
            cancel, current.id, config, on_start, on_tick, on_end
        )

    async def pause(self, interval: Interval) -> Interval:
        """Pause a running interval.

        The tick engine notices the pause at its next tick and stops without
        counting that tick.

        Raises:
            IntervalNotRunningError: If the interval is not running
        """
        current = await self.repository.by_id(interval.id)
        if current.state != STATE_RUNNING:
            raise IntervalNotRunningError(current.id, current.state)

        current.state = STATE_PAUSED
        await self.repository.update(current)
        return current

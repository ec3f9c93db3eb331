"""Interval data models."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Category = Literal["work", "short_rest", "long_rest"]
State = Literal["not_started", "running", "paused", "done", "cancelled"]

CATEGORY_WORK: Category = "work"
CATEGORY_SHORT_REST: Category = "short_rest"
CATEGORY_LONG_REST: Category = "long_rest"
REST_CATEGORIES: tuple[Category, ...] = (CATEGORY_SHORT_REST, CATEGORY_LONG_REST)

STATE_NOT_STARTED: State = "not_started"
STATE_RUNNING: State = "running"
STATE_PAUSED: State = "paused"
STATE_DONE: State = "done"
STATE_CANCELLED: State = "cancelled"
TERMINAL_STATES: tuple[State, ...] = (STATE_DONE, STATE_CANCELLED)

DEFAULT_WORK = timedelta(minutes=25)
DEFAULT_SHORT_REST = timedelta(minutes=5)
DEFAULT_LONG_REST = timedelta(minutes=15)
DEFAULT_TICK = timedelta(seconds=1)


class Interval(BaseModel):
    """A single timed work or rest session.

    Attributes:
        id: Identity assigned by the store on create (0 until persisted)
        start_time: When the interval first started running
        planned_duration: Target length, fixed at creation
        actual_duration: Elapsed running time, advanced one tick at a time
        category: Work, short rest or long rest
        state: Lifecycle state
    """

    id: int = 0
    start_time: datetime | None = None
    planned_duration: timedelta = timedelta(0)
    actual_duration: timedelta = timedelta(0)
    category: Category = CATEGORY_WORK
    state: State = STATE_NOT_STARTED

    @property
    def remaining(self) -> timedelta:
        """Time left before the interval is done."""
        return max(timedelta(0), self.planned_duration - self.actual_duration)

    @property
    def is_rest(self) -> bool:
        return self.category in REST_CATEGORIES

    @property
    def is_finished(self) -> bool:
        return self.state in TERMINAL_STATES


class IntervalConfig(BaseModel):
    """Planned durations per category plus the tick unit.

    Zero or missing durations fall back to the standard 25/5/15 minutes.
    """

    model_config = ConfigDict(frozen=True)

    work: timedelta = Field(default=DEFAULT_WORK)
    short_rest: timedelta = Field(default=DEFAULT_SHORT_REST)
    long_rest: timedelta = Field(default=DEFAULT_LONG_REST)
    tick: timedelta = Field(default=DEFAULT_TICK)

    @field_validator("work", "short_rest", "long_rest", "tick", mode="before")
    @classmethod
    def use_default_when_unset(cls, v, info):
        """Map None/zero to the field default."""
        if v is None or v == 0 or v == timedelta(0):
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("work", "short_rest", "long_rest", "tick")
    @classmethod
    def must_be_positive(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("duration cannot be negative")
        return v

    def duration_for(self, category: Category) -> timedelta:
        """Planned duration for an interval of the given category."""
        if category == CATEGORY_WORK:
            return self.work
        elif category == CATEGORY_SHORT_REST:
            return self.short_rest
        return self.long_rest


# Notification hook invoked with an interval snapshot
Callback = Callable[[Interval], None]

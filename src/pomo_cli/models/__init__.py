"""pomo CLI domain models.

This package contains the Pydantic models for intervals and configuration,
the interval error taxonomy and the category sequencing rules.
"""

from .config_models import AppConfig, OutputConfig
from .exceptions import (
    IntervalCompletedError,
    IntervalNotRunningError,
    InvalidIDError,
    InvalidStateError,
    NoIntervalsError,
    NotFoundError,
    PomodoroError,
)
from .interval import Callback, Category, Interval, IntervalConfig, State
from .sequencer import choose_category

__all__ = [
    # Interval models
    "Interval",
    "IntervalConfig",
    "Category",
    "State",
    "Callback",
    "choose_category",
    # Config models
    "AppConfig",
    "OutputConfig",
    # Errors
    "PomodoroError",
    "NoIntervalsError",
    "InvalidIDError",
    "NotFoundError",
    "IntervalNotRunningError",
    "IntervalCompletedError",
    "InvalidStateError",
]

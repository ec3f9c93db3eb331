"""Services module for pomo CLI - Interval logic layer."""

from .interval_service import IntervalService, next_category
from .session_controller import SessionController
from .tick_engine import TickEngine

__all__ = [
    "IntervalService",
    "SessionController",
    "TickEngine",
    "next_category",
]

"""Category sequencing rules for consecutive intervals."""

from __future__ import annotations

from collections.abc import Sequence

from .interval import (
    CATEGORY_LONG_REST,
    CATEGORY_SHORT_REST,
    CATEGORY_WORK,
    Category,
    Interval,
)

# How many recent rest intervals decide between a short and a long rest
BREAKS_WINDOW = 3


def choose_category(last: Interval | None, breaks: Sequence[Interval]) -> Category:
    """Decide the category of the next interval.

    Args:
        last: The most recent interval, or None when there is no history
        breaks: Most recent rest intervals, newest first (at most BREAKS_WINDOW
            are considered)

    Returns:
        "work" after nothing or after a rest; otherwise "long_rest" unless one
        of the last three rests already was a long rest.
    """
    if last is None or last.is_rest:
        return CATEGORY_WORK

    recent = list(breaks)[:BREAKS_WINDOW]
    if len(recent) < BREAKS_WINDOW:
        return CATEGORY_LONG_REST

    if any(i.category == CATEGORY_LONG_REST for i in recent):
        return CATEGORY_SHORT_REST

    return CATEGORY_LONG_REST

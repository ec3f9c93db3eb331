"""Custom exceptions for pomo CLI intervals."""


class PomodoroError(Exception):
    """Base exception for all interval errors."""


class NoIntervalsError(PomodoroError):
    """Raised when the interval store holds no intervals yet."""

    def __init__(self, message: str = "no intervals"):
        super().__init__(message)


class InvalidIDError(PomodoroError):
    """Raised when an interval ID is zero, negative or malformed."""

    def __init__(self, interval_id: object):
        super().__init__(f"invalid interval id: {interval_id!r}")
        self.interval_id = interval_id


class NotFoundError(PomodoroError):
    """Raised when no interval exists with the given ID."""

    def __init__(self, interval_id: int):
        super().__init__(f"interval {interval_id} not found")
        self.interval_id = interval_id


class IntervalNotRunningError(PomodoroError):
    """Raised when pausing an interval that is not running."""

    def __init__(self, interval_id: int, state: str):
        super().__init__(f"interval {interval_id} not running (state: {state})")
        self.interval_id = interval_id
        self.state = state


class IntervalCompletedError(PomodoroError):
    """Raised when starting an interval that is done or cancelled."""

    def __init__(self, interval_id: int, state: str):
        super().__init__(
            f"interval {interval_id} already completed (state: {state}), cannot start"
        )
        self.interval_id = interval_id
        self.state = state


class InvalidStateError(PomodoroError):
    """Raised when an interval carries an unrecognized state value."""

    def __init__(self, interval_id: int, state: object):
        super().__init__(f"interval {interval_id} has invalid state: {state!r}")
        self.interval_id = interval_id
        self.state = state

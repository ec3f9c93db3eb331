"""
Exit codes for pomo CLI.

Each interval error kind gets its own code so scripts can tell them apart.
"""

from pomo_cli.models import (
    IntervalCompletedError,
    IntervalNotRunningError,
    InvalidIDError,
    InvalidStateError,
    NoIntervalsError,
    NotFoundError,
    PomodoroError,
)

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Store holds no intervals
ERROR_NO_INTERVALS = 3

# Interval ID is zero or malformed
ERROR_INVALID_ID = 4

# Interval not found
ERROR_NOT_FOUND = 5

# Pause requested for an interval that is not running
ERROR_NOT_RUNNING = 6

# Start requested for a done or cancelled interval
ERROR_COMPLETED = 7

# Stored interval state is not recognized
ERROR_INVALID_STATE = 8

# Interval cancelled by the user (128 + SIGINT)
CANCELLED = 130

_ERROR_CODES: list[tuple[type[PomodoroError], int]] = [
    (NoIntervalsError, ERROR_NO_INTERVALS),
    (InvalidIDError, ERROR_INVALID_ID),
    (NotFoundError, ERROR_NOT_FOUND),
    (IntervalNotRunningError, ERROR_NOT_RUNNING),
    (IntervalCompletedError, ERROR_COMPLETED),
    (InvalidStateError, ERROR_INVALID_STATE),
]


def exit_code_for(error: BaseException) -> int:
    """Map an exception to the exit code the CLI should return."""
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return ERROR_GENERAL


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NO_INTERVALS: "ERROR_NO_INTERVALS",
        ERROR_INVALID_ID: "ERROR_INVALID_ID",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_NOT_RUNNING: "ERROR_NOT_RUNNING",
        ERROR_COMPLETED: "ERROR_COMPLETED",
        ERROR_INVALID_STATE: "ERROR_INVALID_STATE",
        CANCELLED: "CANCELLED",
    }
    return code_names.get(code, f"UNKNOWN({code})")

"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir
from rich.logging import RichHandler

_APP_NAME = "pomo_cli"
_LOG_FILE = "pomo.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger (or a named child), initialising it once.

    Records go to a rotating file under the user log directory. Nothing is
    written to the terminal unless ``enable_console_logging`` was called.
    """
    global _logger
    if _logger is None:
        _logger = _build_logger()
    if name:
        return _logger.getChild(name)
    return _logger


def enable_console_logging(level: int = logging.DEBUG) -> None:
    """Mirror log records to stderr through rich, for ``--verbose`` runs."""
    logger = get_logger()
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return
    handler = RichHandler(level=level, show_path=False, rich_tracebacks=True)
    logger.addHandler(handler)


def _build_logger() -> logging.Logger:
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if any(
        isinstance(h, (logging.handlers.RotatingFileHandler, logging.NullHandler))
        for h in logger.handlers
    ):
        return logger

    log_dir = Path(user_log_dir(_APP_NAME))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        # Read-only home directories still get a working CLI
        handler = logging.NullHandler()

    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger

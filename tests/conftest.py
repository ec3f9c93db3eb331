"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config and log
directories, plus interval fixtures that run on a millisecond tick.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from unittest.mock import patch

import pytest

from pomo_cli.adapters.memory import InMemoryIntervalRepository
from pomo_cli.models import AppConfig, Interval, IntervalConfig

TICK = timedelta(milliseconds=10)


# ---------------------------------------------------------------------------
# Interval helpers
# ---------------------------------------------------------------------------


class CallbackRecorder:
    """Collects interval snapshots passed to the engine callbacks."""

    def __init__(self):
        self.started: list[Interval] = []
        self.ticks: list[Interval] = []
        self.ended: list[Interval] = []

    def on_start(self, interval: Interval) -> None:
        self.started.append(interval.model_copy())

    def on_tick(self, interval: Interval) -> None:
        self.ticks.append(interval.model_copy())

    def on_end(self, interval: Interval) -> None:
        self.ended.append(interval.model_copy())

    @property
    def callbacks(self):
        return self.on_start, self.on_tick, self.on_end


@pytest.fixture()
def repo():
    return InMemoryIntervalRepository()


@pytest.fixture()
def fast_config() -> IntervalConfig:
    """Work = 3 ticks, short rest = 2 ticks, long rest = 4 ticks."""
    return IntervalConfig(
        work=TICK * 3,
        short_rest=TICK * 2,
        long_rest=TICK * 4,
        tick=TICK,
    )


@pytest.fixture()
def recorder():
    return CallbackRecorder()


# ---------------------------------------------------------------------------
# Config and log isolation
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory."""
    from pomo_cli.services.config_service import ConfigService, get_config_service

    get_config_service.cache_clear()
    svc = ConfigService(config_dir=tmp_path / "config")
    yield svc
    get_config_service.cache_clear()


@pytest.fixture()
def fast_config_service(tmp_config, fast_config):
    """ConfigService whose loaded intervals run on the millisecond tick."""
    tmp_config._config = AppConfig(intervals=fast_config)
    return tmp_config


@pytest.fixture()
def patch_config_service(fast_config_service):
    """Patch get_config_service everywhere the CLI imported it."""
    targets = [
        "pomo_cli.main.get_config_service",
        "pomo_cli.commands.timer.get_config_service",
        "pomo_cli.commands.config.get_config_service",
    ]
    patchers = [patch(t, return_value=fast_config_service) for t in targets]
    for p in patchers:
        p.start()
    yield fast_config_service
    for p in patchers:
        p.stop()


@pytest.fixture(autouse=True)
def isolate_logs(tmp_path):
    """Keep command logging inside the test's temporary directory."""
    import pomo_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomo_cli").handlers.clear()
    with patch("pomo_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    for handler in logging.getLogger("pomo_cli").handlers:
        handler.close()
    logging.getLogger("pomo_cli").handlers.clear()

"""Unit tests for InMemoryIntervalRepository."""

from __future__ import annotations

import asyncio
from datetime import timedelta

import pytest

from pomo_cli.models import (
    Interval,
    InvalidIDError,
    NoIntervalsError,
    NotFoundError,
)


def _interval(category: str = "work", minutes: int = 25) -> Interval:
    return Interval(category=category, planned_duration=timedelta(minutes=minutes))


# ---------------------------------------------------------------------------
# create / by_id
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_assigns_sequential_ids(repo):
    first = await repo.create(_interval())
    second = await repo.create(_interval("short_rest", 5))

    assert first == 1
    assert second == 2


@pytest.mark.asyncio
async def test_create_ignores_incoming_id(repo):
    interval_id = await repo.create(Interval(id=42))

    assert interval_id == 1
    assert (await repo.by_id(1)).id == 1


@pytest.mark.asyncio
async def test_by_id_returns_stored_values(repo):
    interval_id = await repo.create(_interval("long_rest", 15))

    stored = await repo.by_id(interval_id)

    assert stored.category == "long_rest"
    assert stored.planned_duration == timedelta(minutes=15)
    assert stored.state == "not_started"


@pytest.mark.asyncio
async def test_by_id_returns_a_copy(repo):
    """Mutating a fetched interval must not change the store."""
    interval_id = await repo.create(_interval())

    fetched = await repo.by_id(interval_id)
    fetched.state = "running"

    assert (await repo.by_id(interval_id)).state == "not_started"


@pytest.mark.asyncio
async def test_create_stores_a_copy(repo):
    interval = _interval()
    await repo.create(interval)

    interval.state = "done"

    assert (await repo.by_id(1)).state == "not_started"


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_id", [0, -1])
async def test_by_id_invalid_id(repo, bad_id):
    with pytest.raises(InvalidIDError):
        await repo.by_id(bad_id)


@pytest.mark.asyncio
async def test_by_id_unknown_id(repo):
    await repo.create(_interval())

    with pytest.raises(NotFoundError) as exc_info:
        await repo.by_id(2)

    assert exc_info.value.interval_id == 2


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_update_replaces_record(repo):
    interval_id = await repo.create(_interval())
    interval = await repo.by_id(interval_id)
    interval.state = "running"
    interval.actual_duration = timedelta(seconds=3)

    await repo.update(interval)

    stored = await repo.by_id(interval_id)
    assert stored.state == "running"
    assert stored.actual_duration == timedelta(seconds=3)


@pytest.mark.asyncio
async def test_update_with_zero_id_fails(repo):
    await repo.create(_interval())

    with pytest.raises(InvalidIDError):
        await repo.update(Interval(id=0))


@pytest.mark.asyncio
async def test_update_unknown_id_fails(repo):
    with pytest.raises(NotFoundError):
        await repo.update(Interval(id=7))


# ---------------------------------------------------------------------------
# last / breaks / history
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_last_on_empty_store(repo):
    with pytest.raises(NoIntervalsError):
        await repo.last()


@pytest.mark.asyncio
async def test_last_returns_most_recent(repo):
    await repo.create(_interval())
    await repo.create(_interval("short_rest", 5))

    last = await repo.last()

    assert last.id == 2
    assert last.category == "short_rest"


@pytest.mark.asyncio
async def test_breaks_skips_work_newest_first(repo):
    for category in ["work", "short_rest", "work", "long_rest", "work", "short_rest"]:
        await repo.create(_interval(category))

    breaks = await repo.breaks(3)

    assert [b.id for b in breaks] == [6, 4, 2]
    assert [b.category for b in breaks] == ["short_rest", "long_rest", "short_rest"]


@pytest.mark.asyncio
async def test_breaks_caps_at_n(repo):
    for _ in range(5):
        await repo.create(_interval("short_rest"))

    assert len(await repo.breaks(3)) == 3


@pytest.mark.asyncio
async def test_breaks_with_fewer_available(repo):
    await repo.create(_interval("work"))
    await repo.create(_interval("long_rest"))

    breaks = await repo.breaks(3)

    assert [b.id for b in breaks] == [2]


@pytest.mark.asyncio
async def test_breaks_empty_store(repo):
    assert await repo.breaks(3) == []


@pytest.mark.asyncio
async def test_history_newest_first_with_limit(repo):
    for category in ["work", "long_rest", "work"]:
        await repo.create(_interval(category))

    assert [i.id for i in await repo.history()] == [3, 2, 1]
    assert [i.id for i in await repo.history(limit=2)] == [3, 2]


@pytest.mark.asyncio
async def test_concurrent_creates_get_unique_ids(repo):
    ids = await asyncio.gather(*(repo.create(_interval()) for _ in range(20)))

    assert sorted(ids) == list(range(1, 21))

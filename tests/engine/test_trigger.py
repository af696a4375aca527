from __future__ import annotations

import asyncio

import pytest

from catalogsync.contracts.sync import SyncResult, SyncStatus
from catalogsync.engine.coordinator import SyncCoordinator
from catalogsync.engine.trigger import SyncTrigger
from tests.fakes.source import BrokenSource, FakeSource
from tests.fakes.store import FakeStore


@pytest.mark.asyncio
async def test_start_runs_startup_pass(records) -> None:
    store = FakeStore()
    trigger = SyncTrigger(SyncCoordinator(FakeSource(records), store))

    task = trigger.start()
    assert task is not None
    results = await trigger.wait()

    assert [result.status for result in results] == [SyncStatus.COMPLETED]
    assert store.list_ids() == {1, 2, 3}


@pytest.mark.asyncio
async def test_request_while_running_is_dropped(records) -> None:
    source = FakeSource(records)
    source.gate = asyncio.Event()
    trigger = SyncTrigger(SyncCoordinator(source, FakeStore()))

    first = trigger.start()
    await source.entered.wait()
    second = trigger.request_sync()
    source.gate.set()
    await trigger.wait()

    assert first is not None
    assert second is None
    assert source.ids_calls == 1


@pytest.mark.asyncio
async def test_on_result_receives_every_outcome(records) -> None:
    seen: list[SyncResult] = []
    trigger = SyncTrigger(SyncCoordinator(BrokenSource(), FakeStore()), on_result=seen.append)

    trigger.request_sync()
    await trigger.wait()

    assert len(seen) == 1
    assert seen[0].status is SyncStatus.FAILED


@pytest.mark.asyncio
async def test_callback_error_does_not_escape(records) -> None:
    def explode(result: SyncResult) -> None:
        raise RuntimeError("ui gone")

    trigger = SyncTrigger(SyncCoordinator(FakeSource(records), FakeStore()), on_result=explode)

    trigger.request_sync()
    results = await trigger.wait()

    assert results[0].ok


@pytest.mark.asyncio
async def test_wait_without_tasks_returns_empty(records) -> None:
    trigger = SyncTrigger(SyncCoordinator(FakeSource(records), FakeStore()))

    assert await trigger.wait() == []


@pytest.mark.asyncio
async def test_aclose_cancels_pending_pass(records) -> None:
    source = FakeSource(records)
    source.gate = asyncio.Event()
    coordinator = SyncCoordinator(source, FakeStore())
    trigger = SyncTrigger(coordinator)

    task = trigger.start()
    await source.entered.wait()
    await trigger.aclose()

    assert task is not None
    assert task.cancelled()
    assert not coordinator.running


@pytest.mark.asyncio
async def test_wait_leaves_out_cancelled_pass(records) -> None:
    source = FakeSource(records)
    source.gate = asyncio.Event()
    trigger = SyncTrigger(SyncCoordinator(source, FakeStore()))

    task = trigger.start()
    await source.entered.wait()
    assert task is not None
    task.cancel()

    assert await trigger.wait() == []
    assert task.cancelled()

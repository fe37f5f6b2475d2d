"""Testes para controle de tasks assíncronas do webhook."""

from __future__ import annotations

import asyncio

import pytest

from api.routes.whatsapp import webhook_runtime_tasks


async def _wait_until_tasks_empty(timeout: float = 1.0) -> None:
    start = asyncio.get_running_loop().time()
    while webhook_runtime_tasks._active_tasks:
        if asyncio.get_running_loop().time() - start > timeout:
            break
        await asyncio.sleep(0.01)


async def _cancel_active_tasks() -> None:
    for task in list(webhook_runtime_tasks._active_tasks):
        task.cancel()
    if webhook_runtime_tasks._active_tasks:
        await asyncio.gather(
            *list(webhook_runtime_tasks._active_tasks),
            return_exceptions=True,
        )
    webhook_runtime_tasks._active_tasks.clear()


@pytest.fixture(autouse=True)
async def _cleanup_active_tasks() -> None:
    await _cancel_active_tasks()
    webhook_runtime_tasks.reset_processing_task_stats()
    yield
    await _cancel_active_tasks()


@pytest.mark.asyncio
async def test_schedule_processing_task_runs_coroutine_and_cleans_active_set() -> None:
    event = asyncio.Event()

    async def _work() -> None:
        event.set()

    active = webhook_runtime_tasks.schedule_processing_task(
        correlation_id="corr-1",
        coroutine=_work(),
    )

    assert active == 1
    await asyncio.wait_for(event.wait(), timeout=1.0)
    await _wait_until_tasks_empty()
    assert webhook_runtime_tasks.active_task_count() == 0


@pytest.mark.asyncio
async def test_schedule_processing_task_logs_failure(caplog: pytest.LogCaptureFixture) -> None:
    async def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level("ERROR"):
        webhook_runtime_tasks.schedule_processing_task(
            correlation_id="corr-2",
            coroutine=_boom(),
        )
        await _wait_until_tasks_empty()

    assert "webhook_processing_task_failed" in caplog.text


@pytest.mark.asyncio
async def test_drain_processing_tasks_returns_immediately_when_empty() -> None:
    await webhook_runtime_tasks.drain_processing_tasks(timeout_seconds=0.01)
    assert webhook_runtime_tasks.active_task_count() == 0


@pytest.mark.asyncio
async def test_drain_processing_tasks_waits_for_pending() -> None:
    finished: list[str] = []

    async def _work() -> None:
        await asyncio.sleep(0.02)
        finished.append("done")

    webhook_runtime_tasks.schedule_processing_task(correlation_id="corr-3", coroutine=_work())
    cancelled = await webhook_runtime_tasks.drain_processing_tasks(timeout_seconds=1.0)

    assert finished == ["done"]
    assert cancelled == 0


@pytest.mark.asyncio
async def test_drain_processing_tasks_cancels_slow_tasks(caplog: pytest.LogCaptureFixture) -> None:
    async def _slow() -> None:
        await asyncio.sleep(10)

    webhook_runtime_tasks.schedule_processing_task(correlation_id="corr-4", coroutine=_slow())

    with caplog.at_level("WARNING"):
        cancelled = await webhook_runtime_tasks.drain_processing_tasks(timeout_seconds=0.01)
        await _wait_until_tasks_empty()

    assert cancelled == 1
    assert "webhook_processing_shutdown_cancelled" in caplog.text
    assert webhook_runtime_tasks.active_task_count() == 0


@pytest.mark.asyncio
async def test_processing_task_stats_count_outcomes() -> None:
    async def _ok() -> None:
        return None

    async def _boom() -> None:
        raise ValueError("boom")

    webhook_runtime_tasks.schedule_processing_task(correlation_id="ok", coroutine=_ok())
    webhook_runtime_tasks.schedule_processing_task(correlation_id="bad", coroutine=_boom())
    await _wait_until_tasks_empty()

    stats = webhook_runtime_tasks.processing_task_stats()
    assert stats.scheduled == 2
    assert stats.completed == 1
    assert stats.failed == 1


@pytest.mark.asyncio
async def test_task_failure_log_carries_correlation_id(caplog: pytest.LogCaptureFixture) -> None:
    async def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level("ERROR"):
        webhook_runtime_tasks.schedule_processing_task(correlation_id="corr-xyz", coroutine=_boom())
        await _wait_until_tasks_empty()

    [record] = [r for r in caplog.records if r.getMessage() == "webhook_processing_task_failed"]
    assert record.correlation_id == "corr-xyz"

"""Tasks em background do processamento de transferências.

Cada POST do webhook (modo async) vira uma task nomeada pelo correlation_id.
A concorrência é limitada por semáforo; o shutdown aguarda as pendentes.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

MAX_CONCURRENT_TASKS = 20
TASK_NAME_PREFIX = "inbound-transfer:"

_task_semaphore = asyncio.Semaphore(MAX_CONCURRENT_TASKS)
_active_tasks: set[asyncio.Task[Any]] = set()


@dataclass
class ProcessingTaskStats:
    """Contadores desde o start do processo."""

    scheduled: int = 0
    completed: int = 0
    failed: int = 0
    cancelled: int = 0


_stats = ProcessingTaskStats()


def active_task_count() -> int:
    return len(_active_tasks)


def processing_task_stats() -> ProcessingTaskStats:
    return _stats


def reset_processing_task_stats() -> None:
    """Zera os contadores (testes)."""
    global _stats
    _stats = ProcessingTaskStats()


def _correlation_id_of(task: asyncio.Task[Any]) -> str:
    return task.get_name().removeprefix(TASK_NAME_PREFIX)


def schedule_processing_task(
    *,
    correlation_id: str,
    coroutine: Coroutine[Any, Any, None],
) -> int:
    """Agenda o processamento e retorna o número de tasks ativas.

    A task herda o contexto atual (inclusive o correlation_id do log).
    """
    task = asyncio.create_task(
        _run_with_limit(coroutine),
        name=f"{TASK_NAME_PREFIX}{correlation_id}",
    )
    _active_tasks.add(task)
    _stats.scheduled += 1
    task.add_done_callback(_on_processing_task_done)
    logger.info(
        "webhook_processing_scheduled",
        extra={
            "correlation_id": correlation_id,
            "mode": "async",
            "active_tasks": len(_active_tasks),
        },
    )
    return len(_active_tasks)


async def _run_with_limit(coroutine: Coroutine[Any, Any, None]) -> None:
    async with _task_semaphore:
        await coroutine


def _on_processing_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    if task.cancelled():
        _stats.cancelled += 1
        return

    exc = task.exception()
    if exc is None:
        _stats.completed += 1
        return

    _stats.failed += 1
    logger.error(
        "webhook_processing_task_failed",
        extra={
            "correlation_id": _correlation_id_of(task),
            "error_type": type(exc).__name__,
            "active_tasks": len(_active_tasks),
        },
    )


async def drain_processing_tasks(timeout_seconds: float = 30.0) -> int:
    """Aguarda as tasks pendentes; cancela as que excederem o timeout.

    Returns:
        Quantidade de tasks canceladas.
    """
    if not _active_tasks:
        return 0

    pending_now = list(_active_tasks)
    logger.info(
        "webhook_processing_shutdown_wait",
        extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
    )
    _, still_running = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not still_running:
        return 0

    for task in still_running:
        task.cancel()
    await asyncio.gather(*still_running, return_exceptions=True)
    logger.warning(
        "webhook_processing_shutdown_cancelled",
        extra={
            "cancelled_tasks": len(still_running),
            "correlation_ids": sorted(_correlation_id_of(task) for task in still_running),
        },
    )
    return len(still_running)

"""Testes do sink em memória."""

from __future__ import annotations

import pytest

from ai.models.transfer_extraction import NormalizedTransfer
from app.infra.stores import MemoryTransferSink


@pytest.mark.asyncio
async def test_memory_sink_keeps_append_order() -> None:
    sink = MemoryTransferSink()
    first = NormalizedTransfer(amount=1)
    second = NormalizedTransfer(amount=2)

    await sink.append(first)
    await sink.append(second)

    assert sink.records == (first, second)
    sink.clear()
    assert sink.records == ()

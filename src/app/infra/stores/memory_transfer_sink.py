"""Sink em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ai.models.transfer_extraction import NormalizedTransfer

logger = logging.getLogger(__name__)


class MemoryTransferSink:
    """Guarda os registros em lista, na ordem de append."""

    def __init__(self) -> None:
        self._records: list[NormalizedTransfer] = []

    async def append(self, record: NormalizedTransfer) -> None:
        self._records.append(record)
        logger.debug("memory_sink_appended", extra={"total": len(self._records)})

    @property
    def records(self) -> tuple[NormalizedTransfer, ...]:
        return tuple(self._records)

    def clear(self) -> None:
        self._records.clear()

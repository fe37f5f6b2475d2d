"""Protocolo do sink de persistência de transferências (ledger)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ai.models.transfer_extraction import NormalizedTransfer


class TransferSinkProtocol(Protocol):
    """Contrato para append de um registro no ledger.

    A ordem das colunas é responsabilidade do sink. Falhas levantam
    exceção (idealmente PersistenceFailureError).
    """

    async def append(self, record: NormalizedTransfer) -> None:
        """Acrescenta um registro (uma linha)."""
        ...

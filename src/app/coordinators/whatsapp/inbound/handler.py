"""Processamento inbound: extrai, normaliza e grava transferências."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.observability import correlation_scope

if TYPE_CHECKING:
    from app.use_cases.whatsapp.process_inbound_transfer import (
        InboundProcessingResult,
        ProcessInboundTransferUseCase,
    )

logger = logging.getLogger(__name__)


async def process_inbound_payload(
    payload: dict[str, Any],
    correlation_id: str,
    use_case: ProcessInboundTransferUseCase,
) -> InboundProcessingResult:
    """Processa payload inbound via use case de transferências.

    Sem logs com PII. As mensagens são processadas uma a uma.

    Args:
        payload: Payload do webhook
        correlation_id: ID de correlação para rastreamento
        use_case: Use case injetado

    Returns:
        InboundProcessingResult com contadores de processamento
    """
    with correlation_scope(correlation_id):
        return await use_case.execute(payload=payload, correlation_id=correlation_id)

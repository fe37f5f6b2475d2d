"""Runtime do webhook: construção do use case e despacho inline/async."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.routes.whatsapp.webhook_runtime_tasks import (
    drain_processing_tasks,
    schedule_processing_task,
)
from app.coordinators.whatsapp.inbound.handler import process_inbound_payload

if TYPE_CHECKING:
    from app.use_cases.whatsapp.process_inbound_transfer import (
        ProcessInboundTransferUseCase,
    )
    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)

_inbound_use_case: ProcessInboundTransferUseCase | None = None


def get_inbound_use_case() -> ProcessInboundTransferUseCase:
    """Obtém o use case de processamento inbound (lazy-loading)."""
    global _inbound_use_case
    if _inbound_use_case is None:
        from app.bootstrap.dependencies import create_process_inbound_transfer

        _inbound_use_case = create_process_inbound_transfer()
    return _inbound_use_case


def set_inbound_use_case(use_case: ProcessInboundTransferUseCase | None) -> None:
    """Substitui o use case (testes e bootstrap customizado)."""
    global _inbound_use_case
    _inbound_use_case = use_case


async def process_inbound_payload_safe(
    *,
    payload: dict[str, Any],
    correlation_id: str,
    use_case: ProcessInboundTransferUseCase,
) -> None:
    """Executa o processamento inbound registrando qualquer falha."""
    try:
        await process_inbound_payload(
            payload=payload,
            correlation_id=correlation_id,
            use_case=use_case,
        )
    except Exception:
        logger.exception(
            "webhook_processing_failed",
            extra={"channel": "whatsapp", "correlation_id": correlation_id},
        )
        raise


async def dispatch_inbound_processing(
    *,
    payload: dict[str, Any],
    correlation_id: str,
    settings: WhatsAppSettings,
) -> None:
    """Despacha processamento inline ou async conforme configuração."""
    use_case = get_inbound_use_case()

    processing_mode = (settings.webhook_processing_mode or "async").lower()
    if processing_mode == "inline":
        await process_inbound_payload_safe(
            payload=payload,
            correlation_id=correlation_id,
            use_case=use_case,
        )
        logger.info(
            "webhook_processing_completed",
            extra={"channel": "whatsapp", "correlation_id": correlation_id, "mode": "inline"},
        )
        return

    schedule_processing_task(
        correlation_id=correlation_id,
        coroutine=process_inbound_payload_safe(
            payload=payload,
            correlation_id=correlation_id,
            use_case=use_case,
        ),
    )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> int:
    """Aguarda tasks async pendentes durante shutdown do processo."""
    return await drain_processing_tasks(timeout_seconds=timeout_seconds)

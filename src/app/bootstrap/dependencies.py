"""Factories — criação das implementações concretas do pipeline.

Este módulo centraliza o wiring baseado nas configurações de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ai.core import DisabledTransferExtractorClient
from ai.services.transfer_extractor import TransferExtractorService
from api.normalizers.whatsapp import WhatsAppMessageParser
from app.infra.ai import OpenAITransferExtractorClient
from app.infra.documents import PdfTextExtractor
from app.infra.stores import GoogleSheetsTransferSink, MemoryTransferSink
from app.infra.whatsapp import WhatsAppMediaDownloader
from app.services.record_router import RecordRouter
from app.services.text_source_adapter import TextSourceAdapter
from app.use_cases.whatsapp.process_inbound_transfer import ProcessInboundTransferUseCase
from config.settings import (
    get_base_settings,
    get_openai_settings,
    get_sheets_settings,
    get_whatsapp_settings,
)

if TYPE_CHECKING:
    from app.protocols.transfer_sink import TransferSinkProtocol

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Extraction
# ──────────────────────────────────────────────────────────────────────────────


def create_transfer_extractor_service() -> TransferExtractorService:
    """Cria o extrator com client OpenAI configurado.

    Com OPENAI_ENABLED=false nenhum client OpenAI é criado e toda mensagem
    resulta em "nenhuma transferência".
    """
    settings = get_openai_settings()
    if not settings.enabled:
        logger.warning("transfer_extractor_disabled", extra={"component": "transfer_extractor"})
        return TransferExtractorService(client=DisabledTransferExtractorClient())

    client = OpenAITransferExtractorClient(settings=settings)
    logger.info("transfer_extractor_created", extra={"model": settings.model})
    return TransferExtractorService(client=client)


def create_text_source_adapter() -> TextSourceAdapter:
    """Cria o adapter com downloader de mídia e extrator de PDF."""
    return TextSourceAdapter(
        media_fetcher=WhatsAppMediaDownloader(settings=get_whatsapp_settings()),
        document_text_extractor=PdfTextExtractor(),
    )


# ──────────────────────────────────────────────────────────────────────────────
# Persistence
# ──────────────────────────────────────────────────────────────────────────────


def create_transfer_sink() -> TransferSinkProtocol:
    """Cria o sink conforme TRANSFER_SINK_BACKEND.

    - "sheets": GoogleSheetsTransferSink (staging/production)
    - "memory": MemoryTransferSink (dev only)
    """
    settings = get_sheets_settings()
    backend = settings.sink_backend

    if backend == "sheets":
        sink = GoogleSheetsTransferSink.from_settings(settings)
        logger.info("transfer_sink_created", extra={"backend": "sheets"})
        return sink

    if backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_sink_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("transfer_sink_created", extra={"backend": "memory"})
        return MemoryTransferSink()

    msg = f"TRANSFER_SINK_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_record_router() -> RecordRouter:
    return RecordRouter(timeout_seconds=get_sheets_settings().timeout_seconds)


# ──────────────────────────────────────────────────────────────────────────────
# Use case
# ──────────────────────────────────────────────────────────────────────────────


def create_process_inbound_transfer(
    *,
    sink: TransferSinkProtocol | None = None,
) -> ProcessInboundTransferUseCase:
    """Monta o use case inbound com todas as dependências concretas."""
    return ProcessInboundTransferUseCase(
        parser=WhatsAppMessageParser(),
        adapter=create_text_source_adapter(),
        extractor=create_transfer_extractor_service(),
        router=create_record_router(),
        sink=sink or create_transfer_sink(),
    )

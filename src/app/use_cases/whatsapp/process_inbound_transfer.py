"""Use case de processamento inbound de transferências.

Fluxo por mensagem: adapter (texto/PDF) → extrator → router → sink.
Cada mensagem é processada de forma independente; nenhuma exceção escapa
de `process_inbound_message`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.services.record_router import RouteReport
from app.services.text_source_adapter import UnsupportedInput
from utils.errors import ExtractionUnavailableError, PersistenceFailureError

if TYPE_CHECKING:
    from ai.services.transfer_extractor import TransferExtractorService
    from app.domain.inbound_message import RawMessage
    from app.protocols.normalizer import InboundMessageParserProtocol
    from app.protocols.transfer_sink import TransferSinkProtocol
    from app.services.record_router import RecordRouter
    from app.services.text_source_adapter import TextSourceAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InboundProcessingResult:
    """Resultado do processamento de um payload de webhook."""

    processed: int
    skipped: int
    unsupported: int
    written: int
    failed: int


class ProcessInboundTransferUseCase:
    """Processa mensagens inbound e grava as transferências extraídas."""

    def __init__(
        self,
        *,
        parser: InboundMessageParserProtocol,
        adapter: TextSourceAdapter,
        extractor: TransferExtractorService,
        router: RecordRouter,
        sink: TransferSinkProtocol,
    ) -> None:
        self._parser = parser
        self._adapter = adapter
        self._extractor = extractor
        self._router = router
        self._sink = sink

    async def execute(
        self,
        *,
        payload: dict[str, Any],
        correlation_id: str = "",
    ) -> InboundProcessingResult:
        """Processa todas as mensagens do payload, em ordem."""
        messages = self._parser.parse(payload)
        processed = skipped = unsupported = written = failed = 0

        for message in messages:
            report, outcome = await self._process(message)
            if outcome == "unsupported":
                unsupported += 1
            elif outcome == "skipped":
                skipped += 1
            else:
                processed += 1
            written += report.written
            failed += report.failed

        result = InboundProcessingResult(
            processed=processed,
            skipped=skipped,
            unsupported=unsupported,
            written=written,
            failed=failed,
        )
        logger.info(
            "inbound_transfers_processed",
            extra={
                "correlation_id": correlation_id,
                "messages": len(messages),
                "processed": processed,
                "skipped": skipped,
                "unsupported": unsupported,
                "written": written,
                "failed": failed,
            },
        )
        return result

    async def process_inbound_message(self, raw: RawMessage) -> RouteReport:
        """Processa uma única mensagem. Nunca levanta exceção."""
        report, _ = await self._process(raw)
        return report

    async def _process(self, raw: RawMessage) -> tuple[RouteReport, str]:
        try:
            source = await self._adapter.adapt(raw)
        except ExtractionUnavailableError as exc:
            logger.warning(
                "inbound_source_unavailable",
                extra={"message_id": raw.message_id, "kind": raw.kind, "reason": str(exc)},
            )
            return RouteReport.empty(), "skipped"
        except Exception as exc:
            logger.exception(
                "inbound_source_unexpected_error",
                extra={"message_id": raw.message_id, "error_type": type(exc).__name__},
            )
            return RouteReport.empty(), "skipped"

        if isinstance(source, UnsupportedInput):
            logger.info(
                "inbound_message_unsupported",
                extra={
                    "message_id": raw.message_id,
                    "raw_kind": source.raw_kind,
                    "reason": source.reason,
                },
            )
            return RouteReport.empty(), "unsupported"

        try:
            outcome = await self._extractor.extract(source)
        except Exception as exc:
            logger.exception(
                "inbound_extraction_unexpected_error",
                extra={"message_id": raw.message_id, "error_type": type(exc).__name__},
            )
            return RouteReport.empty(), "skipped"

        if outcome.is_empty:
            return RouteReport.empty(), "skipped"

        try:
            report = await self._router.route(outcome, self._sink)
        except PersistenceFailureError as exc:
            logger.error(
                "inbound_transfer_persist_failed",
                extra={"message_id": raw.message_id, "error": str(exc)},
            )
            return RouteReport.all_failed(len(outcome.records), str(exc)), "processed"
        except Exception as exc:
            logger.exception(
                "inbound_transfer_route_unexpected_error",
                extra={"message_id": raw.message_id, "error_type": type(exc).__name__},
            )
            return RouteReport.all_failed(len(outcome.records), "unexpected_error"), "processed"

        return report, "processed"

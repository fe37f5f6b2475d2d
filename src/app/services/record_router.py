"""RecordRouter — despacha registros normalizados para o sink.

Política:
- nenhum registro: no-op
- um registro: falha do sink propaga (mensagem inteira falhou)
- vários: cada registro tem tentativa independente, em ordem; falhas são
  reportadas e não interrompem os seguintes
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from utils.errors import PersistenceFailureError

if TYPE_CHECKING:
    from ai.models.transfer_extraction import ExtractionOutcome, NormalizedTransfer
    from app.protocols.transfer_sink import TransferSinkProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecordWriteResult:
    """Resultado da escrita de um registro (index 1-based)."""

    index: int
    success: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class RouteReport:
    """Relatório de roteamento de uma mensagem."""

    results: tuple[RecordWriteResult, ...] = field(default_factory=tuple)

    @property
    def written(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.success)

    @property
    def failed_indexes(self) -> tuple[int, ...]:
        return tuple(result.index for result in self.results if not result.success)

    @classmethod
    def empty(cls) -> RouteReport:
        return cls()

    @classmethod
    def all_failed(cls, count: int, error: str) -> RouteReport:
        return cls(
            results=tuple(
                RecordWriteResult(index=index, success=False, error=error)
                for index in range(1, count + 1)
            )
        )


class RecordRouter:
    """Envia cada registro ao sink com timeout independente."""

    def __init__(self, *, timeout_seconds: float = 20.0) -> None:
        self._timeout_seconds = timeout_seconds

    async def route(
        self,
        outcome: ExtractionOutcome,
        sink: TransferSinkProtocol,
    ) -> RouteReport:
        """Despacha o outcome para o sink.

        Raises:
            PersistenceFailureError: Somente para outcome "one" com falha.
        """
        if outcome.kind == "none":
            return RouteReport.empty()

        if outcome.kind == "one":
            await self._append(sink, outcome.records[0], index=1)
            return RouteReport(results=(RecordWriteResult(index=1, success=True),))

        results: list[RecordWriteResult] = []
        for index, record in enumerate(outcome.records, start=1):
            try:
                await self._append(sink, record, index=index)
            except PersistenceFailureError as exc:
                results.append(RecordWriteResult(index=index, success=False, error=str(exc)))
            else:
                results.append(RecordWriteResult(index=index, success=True))

        report = RouteReport(results=tuple(results))
        logger.info(
            "transfer_batch_routed",
            extra={
                "records": len(results),
                "written": report.written,
                "failed": report.failed,
            },
        )
        return report

    async def _append(
        self,
        sink: TransferSinkProtocol,
        record: NormalizedTransfer,
        *,
        index: int,
    ) -> None:
        """Um append; qualquer falha vira PersistenceFailureError."""
        try:
            await asyncio.wait_for(sink.append(record), timeout=self._timeout_seconds)
        except PersistenceFailureError as exc:
            self._log_failure(index, type(exc).__name__)
            raise
        except TimeoutError as exc:
            self._log_failure(index, "timeout")
            raise PersistenceFailureError("sink_timeout") from exc
        except Exception as exc:
            self._log_failure(index, type(exc).__name__)
            raise PersistenceFailureError(f"sink_error:{type(exc).__name__}") from exc

    @staticmethod
    def _log_failure(index: int, error_type: str) -> None:
        logger.warning(
            "transfer_record_write_failed",
            extra={"record_index": index, "error_type": error_type},
        )

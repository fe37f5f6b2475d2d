"""Serviço do extrator de transferências (Extraction Engine).

Monta o prompt versionado, chama o client via protocolo, parseia a resposta
e delega ao normalizador. Nunca levanta: toda falha degrada para
"nenhuma transferência encontrada".
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ai.models.transfer_extraction import (
    CandidateTransfer,
    ExtractionOutcome,
    ExtractionRequest,
    NormalizedTransfer,
)
from ai.prompts.transfer_extractor_prompt import load_transfer_extractor_prompt
from ai.rules.transfer_normalizer import expand_amount_lists, normalize_transfer
from ai.utils._json_extractor import parse_model_json
from config.logging import log_fallback
from utils.errors import ExtractionUnavailableError, MalformedModelOutputError

if TYPE_CHECKING:
    from ai.core.transfer_extractor_client import TransferExtractorClientProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "transfer_extractor"


class TransferExtractorService:
    """Extrai zero, um ou vários registros de transferência de um texto."""

    def __init__(self, client: TransferExtractorClientProtocol) -> None:
        self._client = client

    async def extract(self, source_text: str) -> ExtractionOutcome:
        """Executa a extração para um texto (mensagem ou PDF)."""
        return await self.extract_request(ExtractionRequest(source_text=source_text or ""))

    async def extract_request(self, request: ExtractionRequest) -> ExtractionOutcome:
        if not request.source_text.strip():
            log_fallback(logger, _COMPONENT, reason="empty_source_text")
            return ExtractionOutcome.no_transfer_found()

        try:
            prompt = load_transfer_extractor_prompt()
            user_prompt = prompt.format(request.source_text)
        except Exception as exc:
            logger.exception("transfer_extractor_prompt_unavailable", extra={"component": _COMPONENT})
            log_fallback(logger, _COMPONENT, reason=f"prompt_unavailable:{type(exc).__name__}")
            return ExtractionOutcome.no_transfer_found()

        started = time.perf_counter()
        try:
            raw_response = await self._client.complete(
                system_prompt=prompt.system_prompt,
                user_prompt=user_prompt,
            )
        except ExtractionUnavailableError as exc:
            log_fallback(logger, _COMPONENT, reason=str(exc), elapsed_ms=_elapsed_ms(started))
            return ExtractionOutcome.no_transfer_found()
        except Exception:
            logger.exception("transfer_extractor_unexpected_error", extra={"component": _COMPONENT})
            log_fallback(logger, _COMPONENT, reason="unexpected_error")
            return ExtractionOutcome.no_transfer_found()

        try:
            candidates = _parse_candidates(raw_response)
        except MalformedModelOutputError as exc:
            log_fallback(logger, _COMPONENT, reason=f"malformed_output:{exc}")
            return ExtractionOutcome.no_transfer_found()

        try:
            records = _normalize_candidates(candidates)
        except Exception as exc:
            logger.exception("transfer_normalization_failed", extra={"component": _COMPONENT})
            log_fallback(logger, _COMPONENT, reason=f"normalization_failed:{type(exc).__name__}")
            return ExtractionOutcome.no_transfer_found()

        outcome = ExtractionOutcome.from_records(records)
        logger.info(
            "transfer_extraction_completed",
            extra={
                "component": _COMPONENT,
                "prompt_version": prompt.version,
                "outcome": outcome.kind,
                "candidates": len(candidates),
                "records": len(outcome.records),
                "discarded": len(candidates) - len(outcome.records),
                "elapsed_ms": _elapsed_ms(started),
            },
        )
        return outcome


def _parse_candidates(raw_response: str | None) -> list[CandidateTransfer]:
    """Converte a resposta bruta em candidatos.

    Raises:
        MalformedModelOutputError: JSON inválido ou elementos não-objeto.
    """
    data = parse_model_json(raw_response)
    if data is None:
        return []
    if isinstance(data, dict) and isinstance(data.get("transfers"), list):
        data = data["transfers"]
    items = data if isinstance(data, list) else [data]

    candidates: list[CandidateTransfer] = []
    for item in items:
        if item is None:
            continue
        if not isinstance(item, dict):
            raise MalformedModelOutputError("candidate_not_object")
        for expanded in expand_amount_lists(item):
            candidates.append(_to_candidate(expanded))
    return candidates


def _to_candidate(raw: dict[str, Any]) -> CandidateTransfer:
    try:
        return CandidateTransfer.model_validate(raw)
    except ValidationError as exc:
        raise MalformedModelOutputError("candidate_invalid") from exc


def _normalize_candidates(candidates: list[CandidateTransfer]) -> list[NormalizedTransfer]:
    """Normaliza e descarta candidatos sem campos identificadores."""
    records: list[NormalizedTransfer] = []
    for candidate in candidates:
        record = normalize_transfer(candidate)
        if record.has_identifying_fields():
            records.append(record)
    return records


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)

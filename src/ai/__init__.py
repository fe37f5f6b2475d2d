"""Módulo AI do Transfer Tracker.

Extração de transferências bancárias a partir de texto livre:
1. Prompt versionado (ai/prompts/yaml) → client LLM via protocolo
2. Parsing tolerante da resposta (cercas ```json, "null", JSON embutido)
3. Normalização determinística (valores, identificadores, tipo)

ai/ não faz IO direto: o client concreto vive em app/infra/ai.
"""

from ai.models import (
    CandidateTransfer,
    ExtractionOutcome,
    ExtractionRequest,
    NormalizedTransfer,
    TransferType,
)
from ai.rules import normalize_transfer
from ai.services import TransferExtractorService

__all__ = [
    "CandidateTransfer",
    "ExtractionOutcome",
    "ExtractionRequest",
    "NormalizedTransfer",
    "TransferExtractorService",
    "TransferType",
    "normalize_transfer",
]

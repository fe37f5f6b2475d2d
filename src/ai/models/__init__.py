"""Modelos/DTOs da extração de transferências."""

from ai.models.transfer_extraction import (
    IDENTIFIER_FIELDS,
    REQUIRED_ANY_FIELDS,
    TRANSFER_FIELDS,
    CandidateTransfer,
    ExtractionOutcome,
    ExtractionRequest,
    NormalizedTransfer,
    TransferType,
)

__all__ = [
    "IDENTIFIER_FIELDS",
    "REQUIRED_ANY_FIELDS",
    "TRANSFER_FIELDS",
    "CandidateTransfer",
    "ExtractionOutcome",
    "ExtractionRequest",
    "NormalizedTransfer",
    "TransferType",
]

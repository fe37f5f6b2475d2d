"""Normalizador determinístico de transferências.

Aplica as regras de campo sobre cada CandidateTransfer, independente do que
a LLM retornou. É a autoridade final sobre o tipo de transferência.
"""

from __future__ import annotations

from typing import Any

from ai.models.transfer_extraction import (
    IDENTIFIER_FIELDS,
    CandidateTransfer,
    NormalizedTransfer,
)
from ai.utils.transfer_normalization import (
    classify_transfer_type,
    clean_text,
    digits_only,
    parse_amount,
)

_TEXT_FIELDS = (
    "recipient_name",
    "sender_name",
    "date",
    "transaction_number",
    "reference",
    "alias",
    "branch",
    "bank_name",
)


def normalize_transfer(candidate: CandidateTransfer) -> NormalizedTransfer:
    """Normaliza um candidato. Pura, determinística e total."""
    values: dict[str, Any] = {
        "amount": parse_amount(candidate.amount),
        "transfer_type": classify_transfer_type(candidate.transfer_type),
    }
    for name in IDENTIFIER_FIELDS:
        values[name] = digits_only(getattr(candidate, name))
    for name in _TEXT_FIELDS:
        values[name] = clean_text(getattr(candidate, name))
    return NormalizedTransfer(**values)


def renormalize(record: NormalizedTransfer) -> NormalizedTransfer:
    """Reaplica as regras sobre um registro já normalizado (idempotente)."""
    return normalize_transfer(CandidateTransfer.model_validate(record.model_dump()))


def expand_amount_lists(raw: dict[str, Any]) -> list[dict[str, Any]]:
    """Divide um objeto com lista de valores em um objeto por valor.

    Cobre a LLM que ignora a instrução de divisão e devolve
    {"amount": ["8.765.000", "7.623.000"], "cbu": ...}.
    """
    amount = raw.get("amount")
    if not isinstance(amount, list):
        return [raw]
    if not amount:
        return [{**raw, "amount": None}]
    return [{**raw, "amount": item} for item in amount]

"""Regras determinísticas de normalização de transferências."""

from ai.rules.transfer_normalizer import expand_amount_lists, normalize_transfer, renormalize

__all__ = [
    "expand_amount_lists",
    "normalize_transfer",
    "renormalize",
]

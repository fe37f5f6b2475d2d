"""Utilitários de IA: parsing da resposta do modelo e normalização de campos."""

from ai.utils._json_extractor import parse_model_json, strip_code_fences
from ai.utils.transfer_normalization import (
    classify_transfer_type,
    clean_text,
    digits_only,
    parse_amount,
)

__all__ = [
    "classify_transfer_type",
    "clean_text",
    "digits_only",
    "parse_amount",
    "parse_model_json",
    "strip_code_fences",
]

"""Helpers de normalização de campos de transferência.

Funções puras e totais: entrada inválida vira None, nunca exceção.
"""

from __future__ import annotations

import math
import re
import unicodedata
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from ai.models.transfer_extraction import TransferType

MILLION = Decimal(1_000_000)

_CURRENCY_RE = re.compile(r"u\$s|ar\$|us\$|usd|ars|pesos?|[$€£¥]", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_SHORTHAND_RE = re.compile(r"^([\d.,]+)(?:m|mill[oó]n(?:es)?)$", re.IGNORECASE)
_PLAIN_NUMBER_RE = re.compile(r"^[\d.,]+$")
_NON_DIGIT_RE = re.compile(r"\D")

_INVOICED_TOKENS = ("factura", "invoice")
_NULL_LIKE = frozenset({"null", "none", "n/a", "na", "-"})


def parse_amount(value: Any) -> int | None:
    """Converte valor monetário em inteiro não-negativo.

    Exemplos:
        "2.5m" -> 2500000
        "$8,765,000" -> 8765000
        "8.765.000,50" -> 8765000
        1234.9 -> 1234
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        if not math.isfinite(value) or value < 0:
            return None
        return int(value)
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() and value >= 0 else None
    if isinstance(value, str):
        return _parse_amount_text(value)
    return None


def _parse_amount_text(raw: str) -> int | None:
    text = _CURRENCY_RE.sub("", raw)
    text = _WHITESPACE_RE.sub("", text)
    if not text or text.startswith("-"):
        return None
    text = text.lstrip("+")

    shorthand = _SHORTHAND_RE.match(text)
    if shorthand:
        number = _parse_decimal(shorthand.group(1))
        if number is None:
            return None
        return _scale_to_millions(number)

    if not _PLAIN_NUMBER_RE.match(text):
        return None
    integer_part = _strip_cents(text)
    digits = _NON_DIGIT_RE.sub("", integer_part)
    return _digits_to_int(digits)


def _scale_to_millions(number: Decimal) -> int | None:
    """number x 1.000.000 arredondado half-up, com precisão suficiente."""
    with localcontext() as ctx:
        # Precisão proporcional ao número de dígitos; evita InvalidOperation no quantize
        ctx.prec = max(28, len(number.as_tuple().digits) + 16)
        try:
            scaled = (number * MILLION).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return None
    return _digits_to_int(str(scaled))


def _digits_to_int(digits: str) -> int | None:
    if not digits:
        return None
    try:
        return int(digits)
    except ValueError:
        # Acima do limite de conversão str -> int do interpretador
        return None


def _parse_decimal(text: str) -> Decimal | None:
    """Interpreta o último separador como vírgula/ponto decimal."""
    last_sep = max(text.rfind("."), text.rfind(","))
    if last_sep == -1:
        normalized = text
    else:
        integer = _NON_DIGIT_RE.sub("", text[:last_sep])
        fraction = _NON_DIGIT_RE.sub("", text[last_sep + 1 :])
        normalized = f"{integer or '0'}.{fraction or '0'}"
    try:
        return Decimal(normalized)
    except InvalidOperation:
        return None


def _strip_cents(text: str) -> str:
    """Remove parte decimal de 1-2 dígitos (centavos) após o último separador."""
    last_sep = max(text.rfind("."), text.rfind(","))
    if last_sep == -1:
        return text
    fraction = text[last_sep + 1 :]
    if 1 <= len(fraction) <= 2 and fraction.isdigit():
        return text[:last_sep]
    return text


def digits_only(value: Any) -> str | None:
    """Mantém apenas dígitos, preservando a ordem. Vazio -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        text = str(int(value)) if value.is_integer() else str(value)
    else:
        text = str(value)
    digits = _NON_DIGIT_RE.sub("", text)
    return digits or None


def classify_transfer_type(hint: Any) -> TransferType:
    """Classifica a base de pagamento: Con Factura ou Barrani (padrão)."""
    if isinstance(hint, TransferType):
        return hint
    if hint is None:
        return TransferType.DIRECT
    text = _strip_accents(str(hint)).casefold()
    if any(token in text for token in _INVOICED_TOKENS):
        return TransferType.INVOICED
    return TransferType.DIRECT


def clean_text(value: Any) -> str | None:
    """Texto livre: strip, vazio/null-like -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (list, tuple)):
        parts = [part for part in (clean_text(item) for item in value) if part]
        return ", ".join(parts) or None
    if isinstance(value, dict):
        return None
    text = str(value).strip()
    if not text or text.casefold() in _NULL_LIKE:
        return None
    return text


def _strip_accents(text: str) -> str:
    return "".join(
        ch for ch in unicodedata.normalize("NFD", text)
        if unicodedata.category(ch) != "Mn"
    )

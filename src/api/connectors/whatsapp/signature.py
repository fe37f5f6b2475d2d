"""Validação da assinatura X-Hub-Signature-256 enviada pela Meta."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-hub-signature-256"
_SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação de assinatura.

    skipped=True quando nenhum secret está configurado.
    """

    valid: bool
    skipped: bool = False
    error: str | None = None


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def verify_meta_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Valida HMAC-SHA256 do corpo bruto contra o header da Meta.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: App secret configurado (None/vazio desativa a checagem)
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    signature = _get_header(headers, SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")
    if not signature.startswith(_SIGNATURE_PREFIX):
        return SignatureResult(valid=False, error="malformed_signature")

    expected = signature[len(_SIGNATURE_PREFIX):]
    computed = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    # Bytes: compare_digest rejeita str não-ASCII com TypeError
    if not hmac.compare_digest(computed.encode("ascii"), expected.encode("utf-8")):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)

"""Parse e validação inicial do webhook (sem PII)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, verify_meta_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


@dataclass(frozen=True, slots=True)
class WebhookRequest:
    """Request de webhook validado."""

    payload: dict[str, Any]
    signature: SignatureResult
    size_bytes: int

    @property
    def object_type(self) -> str | None:
        value = self.payload.get("object")
        return value if isinstance(value, str) else None


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> WebhookRequest:
    """Valida assinatura e parseia o JSON do webhook.

    Raises:
        InvalidSignatureError: assinatura ausente ou divergente (com secret)
        InvalidJsonError: corpo não é JSON ou não é um objeto
    """
    signature_result = verify_meta_signature(raw_body, headers, secret)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return WebhookRequest(payload=payload, signature=signature_result, size_bytes=len(raw_body))

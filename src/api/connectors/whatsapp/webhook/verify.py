"""Verificação de webhook exigida pela Meta (hub.challenge)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

HUB_MODE = "hub.mode"
HUB_VERIFY_TOKEN = "hub.verify_token"
HUB_CHALLENGE = "hub.challenge"
SUBSCRIBE_MODE = "subscribe"


class WebhookChallengeError(ValueError):
    """Erro de verificação do desafio do webhook."""


def verify_webhook_challenge(
    query_params: Mapping[str, str],
    expected_token: str | None,
) -> str:
    """Valida o challenge e retorna o conteúdo a ser respondido.

    Args:
        query_params: Query string recebida (hub.mode, hub.verify_token, hub.challenge)
        expected_token: Token configurado no servidor

    Raises:
        WebhookChallengeError: token não configurado, modo ou token divergentes

    Returns:
        Valor de hub.challenge (vazio se ausente)
    """
    if not expected_token:
        raise WebhookChallengeError("missing_verify_token")

    if query_params.get(HUB_MODE) != SUBSCRIBE_MODE:
        raise WebhookChallengeError("invalid_mode")
    if query_params.get(HUB_VERIFY_TOKEN) != expected_token:
        raise WebhookChallengeError("token_mismatch")

    return query_params.get(HUB_CHALLENGE) or ""

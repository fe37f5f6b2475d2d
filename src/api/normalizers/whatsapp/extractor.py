"""Extrator de mensagens do payload WhatsApp Business API.

Converte cada mensagem do webhook em RawMessage (texto, documento ou não
suportada). Não faz validação de negócio, apenas extração estrutural.
"""

from __future__ import annotations

import logging
from typing import Any

from app.domain.inbound_message import (
    DocumentMessage,
    RawMessage,
    TextMessage,
    UnsupportedMessage,
)

from ._extraction_helpers import extract_document_fields, extract_text_body, iter_change_values

logger = logging.getLogger(__name__)

WHATSAPP_BUSINESS_OBJECT = "whatsapp_business_account"


def to_raw_message(msg: dict[str, Any]) -> RawMessage:
    """Converte uma mensagem do webhook em RawMessage."""
    message_id = str(msg.get("id") or "")
    from_number = msg.get("from")
    message_type = msg.get("type") or "unknown"

    if message_type == "text":
        body = extract_text_body(msg)
        if body is not None:
            return TextMessage(body=body, message_id=message_id, from_number=from_number)
        return UnsupportedMessage(raw_kind="text:empty", message_id=message_id, from_number=from_number)

    if message_type == "document":
        media_id, mime_type, filename = extract_document_fields(msg)
        if media_id:
            return DocumentMessage(
                mime_type=mime_type or "",
                media_id=media_id,
                filename=filename,
                message_id=message_id,
                from_number=from_number,
            )

    return UnsupportedMessage(raw_kind=str(message_type), message_id=message_id, from_number=from_number)


def extract_raw_messages(payload: dict[str, Any]) -> list[RawMessage]:
    """Extrai todas as mensagens do payload, na ordem recebida.

    Payloads de outros objetos (ex.: page, instagram) e eventos sem
    `messages` (status de entrega) retornam lista vazia.
    """
    if payload.get("object") != WHATSAPP_BUSINESS_OBJECT:
        logger.info("webhook_object_ignored", extra={"object": payload.get("object")})
        return []

    messages: list[RawMessage] = []
    for value in iter_change_values(payload):
        for msg in value.get("messages") or []:
            if isinstance(msg, dict):
                messages.append(to_raw_message(msg))
    return messages


class WhatsAppMessageParser:
    """Implementação de InboundMessageParserProtocol para a Graph API."""

    def parse(self, payload: dict[str, Any]) -> list[RawMessage]:
        return extract_raw_messages(payload)

"""Normalizer WhatsApp — extração de mensagens do webhook.

Tipos tratados pelo pipeline: text e document. Os demais viram
UnsupportedMessage e são descartados pelo adapter.
"""

from .extractor import (
    WHATSAPP_BUSINESS_OBJECT,
    WhatsAppMessageParser,
    extract_raw_messages,
    to_raw_message,
)

__all__ = [
    "WHATSAPP_BUSINESS_OBJECT",
    "WhatsAppMessageParser",
    "extract_raw_messages",
    "to_raw_message",
]

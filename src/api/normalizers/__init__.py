"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- whatsapp/: extrator de mensagens da WhatsApp Business API
"""

from .whatsapp import WhatsAppMessageParser, extract_raw_messages

__all__ = [
    "WhatsAppMessageParser",
    "extract_raw_messages",
]

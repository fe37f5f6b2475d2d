"""Mensagem inbound bruta (RawMessage).

União de três variantes produzidas a partir do payload do webhook:
TextMessage, DocumentMessage e UnsupportedMessage.
"""

from __future__ import annotations

from dataclasses import dataclass

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True, slots=True)
class TextMessage:
    """Mensagem de texto simples."""

    body: str
    message_id: str = ""
    from_number: str | None = None

    @property
    def kind(self) -> str:
        return "text"


@dataclass(frozen=True, slots=True)
class DocumentMessage:
    """Documento anexado (referência de mídia, sem bytes)."""

    mime_type: str
    media_id: str
    filename: str | None = None
    message_id: str = ""
    from_number: str | None = None

    @property
    def kind(self) -> str:
        return "document"

    @property
    def is_pdf(self) -> bool:
        return self.mime_type.split(";")[0].strip().lower() == PDF_MIME_TYPE


@dataclass(frozen=True, slots=True)
class UnsupportedMessage:
    """Qualquer outro tipo (imagem, áudio, localização, desconhecido)."""

    raw_kind: str
    message_id: str = ""
    from_number: str | None = None

    @property
    def kind(self) -> str:
        return "unsupported"


RawMessage = TextMessage | DocumentMessage | UnsupportedMessage

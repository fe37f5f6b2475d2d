"""TextSourceAdapter — transforma RawMessage em um bloco de texto.

- texto: corpo literal
- documento PDF: baixa a mídia e extrai o texto
- demais tipos: UnsupportedInput (nenhum colaborador é chamado)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.inbound_message import DocumentMessage, TextMessage
from utils.errors import ExtractionUnavailableError

if TYPE_CHECKING:
    from app.domain.inbound_message import RawMessage
    from app.protocols.document_source import (
        DocumentTextExtractorProtocol,
        MediaFetcherProtocol,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UnsupportedInput:
    """Mensagem que o pipeline não trata (deve ser descartada)."""

    raw_kind: str
    reason: str = "unsupported_kind"


class TextSourceAdapter:
    """Adapter de fontes de texto (mensagem ou PDF)."""

    def __init__(
        self,
        *,
        media_fetcher: MediaFetcherProtocol,
        document_text_extractor: DocumentTextExtractorProtocol,
    ) -> None:
        self._media_fetcher = media_fetcher
        self._document_text_extractor = document_text_extractor

    async def adapt(self, message: RawMessage) -> str | UnsupportedInput:
        """Retorna o texto da mensagem ou UnsupportedInput.

        Raises:
            ExtractionUnavailableError: Download ou extração do PDF falhou.
        """
        if isinstance(message, TextMessage):
            return message.body
        if isinstance(message, DocumentMessage):
            if not message.is_pdf:
                return UnsupportedInput(raw_kind=f"document:{message.mime_type}", reason="not_pdf")
            return await self._adapt_pdf(message)
        return UnsupportedInput(raw_kind=getattr(message, "raw_kind", "unknown"))

    async def _adapt_pdf(self, message: DocumentMessage) -> str:
        try:
            content = await self._media_fetcher.fetch(message.media_id)
            return await self._document_text_extractor.extract_text(content)
        except ExtractionUnavailableError:
            raise
        except Exception as exc:
            logger.warning(
                "document_text_unavailable",
                extra={"error_type": type(exc).__name__, "message_id": message.message_id},
            )
            raise ExtractionUnavailableError("document_collaborator_failed") from exc

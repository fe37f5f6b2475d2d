"""Extração de texto de PDFs com pdfplumber.

O parsing é síncrono (pdfminer); roda em thread para não bloquear o loop.
"""

from __future__ import annotations

import asyncio
import io
import logging

import pdfplumber

from utils.errors import DocumentTextError

logger = logging.getLogger(__name__)


class PdfTextExtractor:
    """Converte bytes de PDF em um único bloco de texto."""

    def __init__(self, *, max_pages: int = 20) -> None:
        self._max_pages = max_pages

    async def extract_text(self, content: bytes) -> str:
        """Extrai texto de todas as páginas (até max_pages).

        Raises:
            DocumentTextError: PDF vazio, corrompido ou sem camada de texto.
        """
        if not content:
            raise DocumentTextError("empty_document")
        text = await asyncio.to_thread(self._extract_sync, content)
        if not text.strip():
            # PDF escaneado (só imagem): OCR não é suportado
            raise DocumentTextError("no_text_layer")
        return text

    def _extract_sync(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = pdf.pages[: self._max_pages]
                chunks = [page.extract_text() or "" for page in pages]
                total_pages = len(pdf.pages)
        except Exception as exc:
            logger.warning(
                "pdf_text_extraction_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise DocumentTextError("unreadable_pdf") from exc

        logger.info(
            "pdf_text_extracted",
            extra={"pages": total_pages, "pages_read": len(chunks)},
        )
        return "\n".join(chunk for chunk in chunks if chunk)

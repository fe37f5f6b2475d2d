"""Protocolos dos colaboradores de documento (mídia + texto)."""

from __future__ import annotations

from typing import Protocol


class MediaFetcherProtocol(Protocol):
    """Contrato para baixar mídia pelo media_id."""

    async def fetch(self, media_id: str) -> bytes:
        """Retorna os bytes da mídia ou levanta MediaDownloadError."""
        ...


class DocumentTextExtractorProtocol(Protocol):
    """Contrato para converter documento em texto."""

    async def extract_text(self, content: bytes) -> str:
        """Retorna o texto do documento ou levanta DocumentTextError."""
        ...

"""Downloader de mídia do WhatsApp (Graph API).

Dois passos: resolve a URL temporária via `GET /{media_id}` e baixa os bytes
com o mesmo bearer token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from config.settings import WhatsAppSettings, get_whatsapp_settings
from utils.errors import MediaDownloadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MediaMetadata:
    """Metadados retornados pela Graph API para um media_id."""

    url: str
    mime_type: str | None = None
    file_size: int | None = None


class WhatsAppMediaDownloader:
    """Helper para baixar mídia via Graph API."""

    def __init__(
        self,
        *,
        settings: WhatsAppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_whatsapp_settings()
        self._timeout = min(self._settings.request_timeout_seconds, 30.0)
        self._transport = transport

    async def fetch(self, media_id: str) -> bytes:
        """Baixa bytes de uma mídia.

        Raises:
            MediaDownloadError: URL não resolvida, timeout após retries,
                status não-2xx ou mídia acima do limite.
        """
        if not media_id:
            raise MediaDownloadError("missing_media_reference")

        max_retries = max(0, min(self._settings.max_retries, 2))
        for attempt in range(max_retries + 1):
            try:
                return await self._attempt_download(media_id)
            except httpx.TimeoutException as exc:
                logger.warning(
                    "whatsapp_media_download_timeout",
                    extra={"attempt": attempt + 1},
                )
                if attempt >= max_retries:
                    raise MediaDownloadError("timeout") from exc
            except httpx.HTTPStatusError as exc:
                logger.warning(
                    "whatsapp_media_download_http_error",
                    extra={"status_code": exc.response.status_code, "attempt": attempt + 1},
                )
                raise MediaDownloadError(f"http_{exc.response.status_code}") from exc
            except httpx.HTTPError as exc:
                logger.warning(
                    "whatsapp_media_download_failed",
                    extra={"error_type": type(exc).__name__, "attempt": attempt + 1},
                )
                if attempt >= max_retries:
                    raise MediaDownloadError("download_failed") from exc

        raise MediaDownloadError("download_failed")

    async def _attempt_download(self, media_id: str) -> bytes:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            metadata = await self._resolve_media(client, media_id)
            if metadata.file_size and metadata.file_size > self._settings.media_max_size_bytes:
                raise MediaDownloadError("media_too_large")
            async with client.stream("GET", metadata.url, headers=self._auth_headers()) as response:
                response.raise_for_status()
                return await self._read_limited(response)

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._settings.access_token}"}

    async def _read_limited(self, response: httpx.Response) -> bytes:
        """Lê o corpo em chunks, abortando ao passar do limite configurado."""
        limit = self._settings.media_max_size_bytes
        content_length = response.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > limit:
            raise MediaDownloadError("media_too_large")

        buffer = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) > limit:
                raise MediaDownloadError("media_too_large")
        return bytes(buffer)

    async def _resolve_media(self, client: httpx.AsyncClient, media_id: str) -> MediaMetadata:
        response = await client.get(
            self._settings.get_media_endpoint(media_id),
            headers=self._auth_headers(),
        )
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as exc:
            raise MediaDownloadError("invalid_media_metadata") from exc

        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            raise MediaDownloadError("media_url_unresolved")
        file_size = str(data.get("file_size") or "")
        return MediaMetadata(
            url=url,
            mime_type=data.get("mime_type"),
            file_size=int(file_size) if file_size.isdigit() else None,
        )

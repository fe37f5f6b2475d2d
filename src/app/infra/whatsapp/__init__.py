"""IO com a Graph API do WhatsApp (download de mídia)."""

from app.infra.whatsapp.media_downloader import MediaMetadata, WhatsAppMediaDownloader

__all__ = ["MediaMetadata", "WhatsAppMediaDownloader"]

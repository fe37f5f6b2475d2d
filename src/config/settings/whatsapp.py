"""Settings específicas de WhatsApp.

Configurações do canal WhatsApp via Graph API (webhook e download de mídia).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v18.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do canal WhatsApp.

    Attributes:
        verify_token: Token para verificação de webhook
        webhook_secret: Secret para validação HMAC de payloads (opcional)
        access_token: Token de acesso à Graph API (download de mídia)
        api_version: Versão da Graph API (ex: v18.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas de download em caso de timeout
        media_max_size_bytes: Tamanho máximo aceito para documentos
        webhook_processing_mode: Modo de processamento do webhook (async|inline)
    """

    verify_token: str = ""
    webhook_secret: str = ""
    access_token: str = ""

    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL

    request_timeout_seconds: float = 30.0
    max_retries: int = 2

    media_max_size_bytes: int = 16 * 1024 * 1024  # 16MB

    webhook_processing_mode: str = "async"

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def get_media_endpoint(self, media_id: str) -> str:
        """Retorna URL de metadados de uma mídia.

        Args:
            media_id: ID da mídia recebido no webhook.

        Returns:
            URL no formato: https://graph.facebook.com/v18.0/{media_id}

        Raises:
            ValueError: Se media_id vazio.
        """
        if not media_id:
            raise ValueError("media_id é obrigatório")
        return f"{self.api_endpoint}/{media_id}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.verify_token:
            errors.append("WHATSAPP_VERIFY_TOKEN não configurado")

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("WHATSAPP_MAX_RETRIES deve ser >= 0")

        if self.webhook_processing_mode not in ("async", "inline"):
            errors.append(
                "WHATSAPP_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'"
            )

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "").lower()
    default_processing_mode = (
        "inline" if environment in ("development", "dev", "test") else "async"
    )
    return WhatsAppSettings(
        verify_token=os.getenv("WHATSAPP_VERIFY_TOKEN", os.getenv("VERIFY_TOKEN", "")),
        webhook_secret=os.getenv("WHATSAPP_WEBHOOK_SECRET", ""),
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", os.getenv("WHATSAPP_TOKEN", "")),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("WHATSAPP_MAX_RETRIES", "2")),
        media_max_size_bytes=int(
            os.getenv("WHATSAPP_MEDIA_MAX_SIZE_BYTES", str(16 * 1024 * 1024))
        ),
        webhook_processing_mode=os.getenv(
            "WHATSAPP_WEBHOOK_PROCESSING_MODE", default_processing_mode
        ).lower(),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()

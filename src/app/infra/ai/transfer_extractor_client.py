"""Cliente OpenAI para o extrator de transferências.

Implementação de IO (camada app/infra).
"""

from __future__ import annotations

import logging

import openai
from openai import AsyncOpenAI

from config.settings.ai.openai import OpenAISettings, get_openai_settings
from utils.errors import ExtractionUnavailableError

logger = logging.getLogger(__name__)

# Alguns modelos (ex.: gpt-5*) não aceitam temperatura customizada.
_TEMPERATURE_LOCKED_PREFIXES = ("gpt-5", "o1", "o3")


def _supports_custom_temperature(model_name: str) -> bool:
    return not model_name.startswith(_TEMPERATURE_LOCKED_PREFIXES)


class OpenAITransferExtractorClient:
    """Cliente LLM (chat completions) para extração de transferências."""

    __slots__ = ("_client", "_max_tokens", "_model", "_temperature", "_timeout_seconds")

    def __init__(
        self,
        *,
        settings: OpenAISettings | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout_seconds: float | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        cfg = settings or get_openai_settings()
        self._model = model or cfg.model or "gpt-4o-mini"
        self._max_tokens = cfg.max_tokens
        self._temperature = cfg.temperature
        self._timeout_seconds = float(timeout_seconds or cfg.timeout_seconds)
        if client is not None:
            self._client = client
        else:
            # Sem retries internos: o pipeline não tem política de retry
            self._client = AsyncOpenAI(
                api_key=api_key or cfg.api_key,
                timeout=self._timeout_seconds,
                max_retries=0,
            )

    async def complete(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Executa chamada OpenAI e retorna o conteúdo textual."""
        kwargs: dict[str, object] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": self._max_tokens,
            "timeout": self._timeout_seconds,
        }
        if _supports_custom_temperature(self._model):
            kwargs["temperature"] = self._temperature

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except openai.APITimeoutError as exc:
            logger.warning(
                "transfer_extractor_openai_timeout",
                extra={"timeout_seconds": self._timeout_seconds},
            )
            raise ExtractionUnavailableError("openai_timeout") from exc
        except openai.APIStatusError as exc:
            logger.warning(
                "transfer_extractor_openai_http_error",
                extra={"status_code": exc.status_code, "error_type": type(exc).__name__},
            )
            raise ExtractionUnavailableError(f"openai_status_{exc.status_code}") from exc
        except openai.OpenAIError as exc:
            logger.warning(
                "transfer_extractor_openai_error",
                extra={"error_type": type(exc).__name__},
            )
            raise ExtractionUnavailableError("openai_error") from exc

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if content is None:
            logger.warning("transfer_extractor_empty_response")
            raise ExtractionUnavailableError("openai_empty_response")

        usage = getattr(response, "usage", None)
        logger.debug(
            "transfer_extractor_openai_ok",
            extra={
                "model": self._model,
                "tokens_used": getattr(usage, "total_tokens", None),
            },
        )
        return content

    async def close(self) -> None:
        """Fecha o cliente HTTP subjacente."""
        await self._client.close()

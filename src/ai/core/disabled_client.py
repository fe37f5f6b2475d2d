"""Client usado quando OPENAI_ENABLED=false.

Não chama nenhuma LLM: toda extração degrada para "nenhuma transferência".
"""

from __future__ import annotations

from utils.errors import ExtractionUnavailableError


class DisabledTransferExtractorClient:
    """Implementa TransferExtractorClientProtocol sem IO."""

    async def complete(self, *, system_prompt: str, user_prompt: str) -> str:
        raise ExtractionUnavailableError("openai_disabled")

"""Protocolo para cliente LLM de extração de transferências."""

from __future__ import annotations

from typing import Protocol


class TransferExtractorClientProtocol(Protocol):
    """Contrato do colaborador de extração generativa.

    Uma única chamada por mensagem, sem estado entre chamadas.
    Falhas de transporte, timeout ou status não-2xx levantam
    ExtractionUnavailableError.
    """

    async def complete(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Executa a chamada e retorna o texto bruto da resposta."""
        ...

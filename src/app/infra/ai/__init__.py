"""Implementações concretas de IO para IA.

ai/ não faz IO direto: o client concreto vive aqui e é injetado via protocolo.
"""

from app.infra.ai.transfer_extractor_client import OpenAITransferExtractorClient

__all__ = ["OpenAITransferExtractorClient"]

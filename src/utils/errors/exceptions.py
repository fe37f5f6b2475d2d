"""Exceções do pipeline de transferências.

Taxonomia:
- ExtractionUnavailableError: colaborador de texto/LLM falhou (degrada para
  "nenhuma transferência")
- MalformedModelOutputError: resposta da LLM não parseável ou sem campos mínimos
- PersistenceFailureError: sink rejeitou a escrita (reportado por registro)
"""

from __future__ import annotations


class TransferPipelineError(RuntimeError):
    """Base para falhas do pipeline de transferências."""


class ExtractionUnavailableError(TransferPipelineError):
    """Colaborador de extração (documento ou LLM) indisponível."""


class MediaDownloadError(ExtractionUnavailableError):
    """Falha ao resolver ou baixar mídia via Graph API."""


class DocumentTextError(ExtractionUnavailableError):
    """Falha ao converter o documento em texto."""


class MalformedModelOutputError(TransferPipelineError):
    """Resposta da LLM inválida (JSON quebrado ou sem campos mínimos)."""


class PersistenceFailureError(TransferPipelineError):
    """Sink de persistência rejeitou a escrita de um registro."""

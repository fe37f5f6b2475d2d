"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DocumentTextError,
    ExtractionUnavailableError,
    MalformedModelOutputError,
    MediaDownloadError,
    PersistenceFailureError,
    TransferPipelineError,
)

__all__ = [
    "DocumentTextError",
    "ExtractionUnavailableError",
    "MalformedModelOutputError",
    "MediaDownloadError",
    "PersistenceFailureError",
    "TransferPipelineError",
]

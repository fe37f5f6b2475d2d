"""Serviços do módulo AI."""

from ai.services.transfer_extractor import TransferExtractorService

__all__ = ["TransferExtractorService"]

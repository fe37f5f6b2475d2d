"""Protocolos e contratos do core da aplicação."""

from .document_source import DocumentTextExtractorProtocol, MediaFetcherProtocol
from .normalizer import InboundMessageParserProtocol
from .transfer_sink import TransferSinkProtocol

__all__ = [
    "DocumentTextExtractorProtocol",
    "InboundMessageParserProtocol",
    "MediaFetcherProtocol",
    "TransferSinkProtocol",
]

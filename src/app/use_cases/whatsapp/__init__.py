"""Use cases específicos de WhatsApp."""

from .process_inbound_transfer import (
    InboundProcessingResult,
    ProcessInboundTransferUseCase,
)

__all__ = [
    "InboundProcessingResult",
    "ProcessInboundTransferUseCase",
]

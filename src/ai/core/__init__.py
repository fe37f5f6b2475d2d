"""Core do módulo AI.

Exporta o protocolo do client LLM e o client desabilitado. A implementação
OpenAI está em app/infra/ai/ (IO).
"""

from ai.core.disabled_client import DisabledTransferExtractorClient
from ai.core.transfer_extractor_client import TransferExtractorClientProtocol

__all__ = ["DisabledTransferExtractorClient", "TransferExtractorClientProtocol"]

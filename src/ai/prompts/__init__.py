"""Prompts do módulo AI.

Arquivos:
- yaml/transfer_extractor.yaml: asset versionado (schema, exemplos, regras)
- transfer_extractor_prompt.py: carga e formatação do prompt
"""

from ai.prompts.transfer_extractor_prompt import (
    MAX_SOURCE_CHARS,
    TransferExtractorPrompt,
    format_transfer_extractor_prompt,
    load_transfer_extractor_prompt,
)

__all__ = [
    "MAX_SOURCE_CHARS",
    "TransferExtractorPrompt",
    "format_transfer_extractor_prompt",
    "load_transfer_extractor_prompt",
]

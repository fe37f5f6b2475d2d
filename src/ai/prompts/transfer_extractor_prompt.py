"""Prompt do extrator de transferências.

O texto enviado à LLM é um contrato externo versionado: campos, exemplos de
montos e regras de divisão vivem em `yaml/transfer_extractor.yaml`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache

from ai.config.prompt_assets_loader import PromptAssetError, load_prompt_yaml, require_str

TRANSFER_EXTRACTOR_ASSET = "transfer_extractor.yaml"

# Limite de caracteres do texto de origem (PDFs longos)
MAX_SOURCE_CHARS = 12_000


@dataclass(frozen=True, slots=True)
class TransferExtractorPrompt:
    """Template carregado do YAML."""

    version: str
    system_prompt: str
    template: str
    field_names: tuple[str, ...]
    field_list: str
    amount_examples: str

    def format(self, source_text: str) -> str:
        """Monta o prompt do usuário para um texto de origem."""
        return self.template.format(
            field_list=self.field_list,
            amount_examples=self.amount_examples,
            source_text=(source_text or "")[:MAX_SOURCE_CHARS],
        )


@lru_cache(maxsize=1)
def load_transfer_extractor_prompt() -> TransferExtractorPrompt:
    """Carrega e valida o asset do prompt (cacheado)."""
    data = load_prompt_yaml(TRANSFER_EXTRACTOR_ASSET)
    fields = data.get("fields")
    if not isinstance(fields, list) or not fields:
        raise PromptAssetError(f"Campo `fields` ausente/invalido: {TRANSFER_EXTRACTOR_ASSET}")

    names: list[str] = []
    lines: list[str] = []
    for item in fields:
        if not isinstance(item, dict) or not item.get("name"):
            raise PromptAssetError(f"Campo sem `name` em {TRANSFER_EXTRACTOR_ASSET}")
        names.append(str(item["name"]))
        lines.append(f"- {item['name']}: {item.get('description', '')}".rstrip())

    examples = data.get("amount_examples") or []
    example_lines = [
        f"- {json.dumps(str(example.get('input')), ensure_ascii=False)} -> {example.get('output')}"
        for example in examples
        if isinstance(example, dict)
    ]

    return TransferExtractorPrompt(
        version=require_str(data, "version", TRANSFER_EXTRACTOR_ASSET),
        system_prompt=require_str(data, "system_prompt", TRANSFER_EXTRACTOR_ASSET).strip(),
        template=require_str(data, "template", TRANSFER_EXTRACTOR_ASSET),
        field_names=tuple(names),
        field_list="\n".join(lines),
        amount_examples="\n".join(example_lines),
    )


def format_transfer_extractor_prompt(source_text: str) -> str:
    """Formata prompt do usuário com o texto da mensagem/PDF."""
    return load_transfer_extractor_prompt().format(source_text)

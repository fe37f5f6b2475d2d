"""Configuração de IA: carregamento de assets YAML de prompt."""

from ai.config.prompt_assets_loader import (
    PromptAssetError,
    clear_prompt_assets_cache,
    load_prompt_yaml,
    require_str,
)

__all__ = [
    "PromptAssetError",
    "clear_prompt_assets_cache",
    "load_prompt_yaml",
    "require_str",
]

"""Loader de assets YAML de prompt.

Lê os YAML versionados em `src/ai/prompts/yaml/`, com cache.

Observação: IO local (filesystem) é permitido aqui por se tratar de assets
versionados do repositório (sem rede).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_AI_DIR = Path(__file__).resolve().parents[1]
_PROMPTS_YAML_DIR = _AI_DIR / "prompts" / "yaml"


class PromptAssetError(RuntimeError):
    """Erro ao carregar assets YAML de prompt."""


def _resolve_relative_path(base_dir: Path, relative_path: str) -> Path:
    if not relative_path:
        raise PromptAssetError("relative_path vazio")
    rel = Path(relative_path)
    if rel.is_absolute() or relative_path.startswith(("/", "\\")):
        raise PromptAssetError("relative_path deve ser relativo")
    if ".." in rel.parts:
        raise PromptAssetError("relative_path invalido (..) não permitido")
    return (base_dir / rel).resolve()


@lru_cache(maxsize=32)
def load_prompt_yaml(relative_path: str) -> dict[str, Any]:
    """Carrega YAML em `src/ai/prompts/yaml/` como dict."""
    path = _resolve_relative_path(_PROMPTS_YAML_DIR, relative_path)
    if not path.is_file():
        raise PromptAssetError(f"Arquivo de prompt YAML nao encontrado: {relative_path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:  # pragma: no cover
        raise PromptAssetError(f"YAML invalido em {relative_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise PromptAssetError(f"YAML de prompt deve ser dict: {relative_path}")
    return data


def require_str(data: dict[str, Any], key: str, relative_path: str) -> str:
    """Retorna campo string não-vazio do YAML ou levanta PromptAssetError."""
    value = data.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise PromptAssetError(f"Campo `{key}` ausente/invalido: {relative_path}")
    return value


def clear_prompt_assets_cache() -> None:
    """Limpa caches (útil em testes)."""
    load_prompt_yaml.cache_clear()

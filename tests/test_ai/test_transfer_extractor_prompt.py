"""Testes do asset YAML do prompt de extração."""

from __future__ import annotations

from pathlib import Path

import pytest

from ai.config import prompt_assets_loader as loader
from ai.models.transfer_extraction import TRANSFER_FIELDS
from ai.prompts.transfer_extractor_prompt import (
    MAX_SOURCE_CHARS,
    format_transfer_extractor_prompt,
    load_transfer_extractor_prompt,
)


@pytest.fixture
def patched_prompts_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(loader, "_PROMPTS_YAML_DIR", tmp_path)
    loader.clear_prompt_assets_cache()
    yield tmp_path
    loader.clear_prompt_assets_cache()


def test_resolve_relative_path_rejects_invalid_inputs() -> None:
    base_dir = Path("base")
    with pytest.raises(loader.PromptAssetError, match="relative_path vazio"):
        loader._resolve_relative_path(base_dir, "")
    with pytest.raises(loader.PromptAssetError, match="deve ser relativo"):
        loader._resolve_relative_path(base_dir, "/abs.yaml")
    with pytest.raises(loader.PromptAssetError, match="\\(\\.\\.\\) não permitido"):
        loader._resolve_relative_path(base_dir, "../segredo.yaml")


def test_load_prompt_yaml_requires_mapping(patched_prompts_dir: Path) -> None:
    (patched_prompts_dir / "list.yaml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(loader.PromptAssetError, match="deve ser dict"):
        loader.load_prompt_yaml("list.yaml")
    with pytest.raises(loader.PromptAssetError, match="nao encontrado"):
        loader.load_prompt_yaml("missing.yaml")


def test_load_prompt_yaml_is_cached_until_cleared(patched_prompts_dir: Path) -> None:
    path = patched_prompts_dir / "cache.yaml"
    path.write_text("version: 1\n", encoding="utf-8")
    assert loader.load_prompt_yaml("cache.yaml") == {"version": 1}

    path.write_text("version: 2\n", encoding="utf-8")
    assert loader.load_prompt_yaml("cache.yaml") == {"version": 1}

    loader.clear_prompt_assets_cache()
    assert loader.load_prompt_yaml("cache.yaml") == {"version": 2}


def test_require_str() -> None:
    assert loader.require_str({"version": 5}, "version", "x.yaml") == "5"
    with pytest.raises(loader.PromptAssetError, match="`system_prompt`"):
        loader.require_str({"system_prompt": " "}, "system_prompt", "x.yaml")


def test_bundled_asset_declares_every_transfer_field() -> None:
    prompt = load_transfer_extractor_prompt()

    assert prompt.version
    assert set(prompt.field_names) == set(TRANSFER_FIELDS)
    assert "JSON" in prompt.system_prompt
    assert '"2.5m" -> 2500000' in prompt.amount_examples


def test_format_includes_source_text_and_rules() -> None:
    text = format_transfer_extractor_prompt("Transferí $1.000 a Juan")

    assert "Transferí $1.000 a Juan" in text
    assert "ARRAY JSON" in text
    assert "{source_text}" not in text
    assert "- cbu:" in text


def test_format_truncates_long_source() -> None:
    text = format_transfer_extractor_prompt("x" * (MAX_SOURCE_CHARS + 500))

    assert "x" * MAX_SOURCE_CHARS in text
    assert "x" * (MAX_SOURCE_CHARS + 1) not in text

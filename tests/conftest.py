"""Configuração do pytest para o projeto Transfer Tracker."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas com lru_cache; cada teste lê o env atual."""
    from config.settings import (
        get_base_settings,
        get_openai_settings,
        get_sheets_settings,
        get_whatsapp_settings,
    )

    getters = (get_base_settings, get_openai_settings, get_sheets_settings, get_whatsapp_settings)
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()

"""Agregador de settings do Transfer Tracker.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    OpenAISettings,
    get_openai_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Ledger settings
from config.settings.sheets import (
    SheetsSettings,
    TransferSinkBackend,
    get_sheets_settings,
)

# Channel-specific settings
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # AI
    "OpenAISettings",
    # Ledger
    "SheetsSettings",
    "TransferSinkBackend",
    # Channels
    "WhatsAppSettings",
    "get_base_settings",
    "get_openai_settings",
    "get_sheets_settings",
    "get_whatsapp_settings",
]

"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- whatsapp/: webhook da WhatsApp Business API
"""

__all__: list[str] = []

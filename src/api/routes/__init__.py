"""Rotas HTTP da API.

- routes/whatsapp/: webhook WhatsApp (challenge e eventos)
- routes/health/: banner e liveness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

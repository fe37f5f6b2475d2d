"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.record_router import RecordRouter, RecordWriteResult, RouteReport
from app.services.text_source_adapter import TextSourceAdapter, UnsupportedInput

__all__ = [
    "RecordRouter",
    "RecordWriteResult",
    "RouteReport",
    "TextSourceAdapter",
    "UnsupportedInput",
]

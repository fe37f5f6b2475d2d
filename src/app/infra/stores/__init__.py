"""Stores — implementações concretas do sink de transferências.

Módulos disponíveis:
    - google_sheets_transfer_sink: ledger em Google Sheets
    - memory_transfer_sink: sink em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.google_sheets_transfer_sink import (
    SHEET_HEADER,
    GoogleSheetsTransferSink,
    build_row,
)
from app.infra.stores.memory_transfer_sink import MemoryTransferSink

__all__ = [
    "SHEET_HEADER",
    "GoogleSheetsTransferSink",
    "MemoryTransferSink",
    "build_row",
]

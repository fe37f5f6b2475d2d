"""Protocolo de parsing do payload inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.inbound_message import RawMessage


class InboundMessageParserProtocol(Protocol):
    """Contrato mínimo para extrair mensagens de um payload de webhook."""

    def parse(self, payload: dict[str, Any]) -> list[RawMessage]: ...

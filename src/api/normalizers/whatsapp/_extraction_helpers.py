"""Helpers de extração de campos por tipo de mensagem WhatsApp."""

from __future__ import annotations

from typing import Any


def extract_text_body(msg: dict[str, Any]) -> str | None:
    """Extrai corpo de mensagem de texto."""
    text_block = msg.get("text")
    if isinstance(text_block, dict):
        body = text_block.get("body")
        return body if isinstance(body, str) else None
    return None


def extract_document_fields(
    msg: dict[str, Any],
) -> tuple[str | None, str | None, str | None]:
    """Extrai (media_id, mime_type, filename) de um documento."""
    document_block = msg.get("document")
    if not isinstance(document_block, dict):
        return None, None, None
    return (
        document_block.get("id"),
        document_block.get("mime_type"),
        document_block.get("filename"),
    )


def iter_change_values(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Retorna os blocos `value` de todas as entries/changes."""
    values: list[dict[str, Any]] = []
    for entry in payload.get("entry") or []:
        if not isinstance(entry, dict):
            continue
        for change in entry.get("changes") or []:
            value = change.get("value") if isinstance(change, dict) else None
            if isinstance(value, dict):
                values.append(value)
    return values

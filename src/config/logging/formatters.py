"""Formatters de logging estruturado.

Campos obrigatórios de todo log JSON:
- asctime, level, logger, message
- correlation_id (um por requisição de webhook)
- service

Sem PII: texto de mensagens, nomes e valores nunca entram no log.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável das chaves no JSON emitido
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "ai.services.transfer_extractor",
            "message": "transfer_extraction_completed",
            "correlation_id": "abc-123",
            "service": "transfer_tracker",
            "records": 3
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )

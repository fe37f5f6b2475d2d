"""Settings do ledger em Google Sheets.

Credenciais da service account, planilha de destino e backend do sink.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

TransferSinkBackend = Literal["sheets", "memory"]

DEFAULT_SHEETS_RANGE = "Sheet1!A:O"


@dataclass(frozen=True)
class SheetsSettings:
    """Configurações do Google Sheets.

    Attributes:
        spreadsheet_id: ID da planilha (ledger)
        service_account_json: JSON da service account (conteúdo, não caminho)
        range_name: Faixa A1 usada no append
        value_input_option: USER_ENTERED (planilha interpreta datas/números) ou RAW
        timeout_seconds: Timeout independente por append
        sink_backend: sheets (produção) ou memory (desenvolvimento/testes)
    """

    spreadsheet_id: str = ""
    service_account_json: str = ""
    range_name: str = DEFAULT_SHEETS_RANGE
    value_input_option: str = "USER_ENTERED"
    timeout_seconds: float = 20.0
    sink_backend: TransferSinkBackend = "sheets"

    def validate(self) -> list[str]:
        """Valida configurações do ledger.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.sink_backend not in ("sheets", "memory"):
            errors.append(f"TRANSFER_SINK_BACKEND inválido: {self.sink_backend}")
            return errors

        if self.sink_backend == "sheets":
            if not self.spreadsheet_id:
                errors.append("GOOGLE_SHEETS_ID não configurado")
            if not self.service_account_json:
                errors.append("GOOGLE_SERVICE_ACCOUNT não configurado")
            elif not _is_json_object(self.service_account_json):
                errors.append("GOOGLE_SERVICE_ACCOUNT não é um JSON válido")

        if self.value_input_option not in ("USER_ENTERED", "RAW"):
            errors.append("GOOGLE_SHEETS_VALUE_INPUT_OPTION deve ser USER_ENTERED ou RAW")

        if self.timeout_seconds <= 0:
            errors.append("GOOGLE_SHEETS_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _is_json_object(raw: str) -> bool:
    try:
        return isinstance(json.loads(raw), dict)
    except json.JSONDecodeError:
        return False


def _load_sheets_from_env() -> SheetsSettings:
    """Carrega SheetsSettings de variáveis de ambiente."""
    return SheetsSettings(
        spreadsheet_id=os.getenv("GOOGLE_SHEETS_ID", ""),
        service_account_json=os.getenv("GOOGLE_SERVICE_ACCOUNT", ""),
        range_name=os.getenv("GOOGLE_SHEETS_RANGE", DEFAULT_SHEETS_RANGE),
        value_input_option=os.getenv("GOOGLE_SHEETS_VALUE_INPUT_OPTION", "USER_ENTERED"),
        timeout_seconds=float(os.getenv("GOOGLE_SHEETS_TIMEOUT_SECONDS", "20")),
        sink_backend=os.getenv("TRANSFER_SINK_BACKEND", "sheets").lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_sheets_settings() -> SheetsSettings:
    """Retorna instância cacheada de SheetsSettings."""
    return _load_sheets_from_env()

"""Sink de transferências em Google Sheets (ledger)."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ai.models.transfer_extraction import TRANSFER_FIELDS
from app.observability import get_correlation_id
from utils.errors import PersistenceFailureError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ai.models.transfer_extraction import NormalizedTransfer
    from config.settings import SheetsSettings

logger = logging.getLogger(__name__)

_COMPONENT = "google_sheets_sink"
_SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"

# Cabeçalho esperado na primeira linha da planilha
SHEET_HEADER: tuple[str, ...] = ("received_at", *TRANSFER_FIELDS)


def build_row(record: NormalizedTransfer, received_at: datetime) -> list[str | int]:
    """Linha do ledger: timestamp de recebimento + campos na ordem fixa."""
    return [received_at.isoformat(), *record.as_row_values()]


class GoogleSheetsTransferSink:
    """Append de uma linha por transferência via Sheets API v4."""

    __slots__ = ("_clock", "_range_name", "_service", "_spreadsheet_id", "_value_input_option")

    def __init__(
        self,
        *,
        spreadsheet_id: str,
        credentials_json: str,
        range_name: str,
        value_input_option: str = "USER_ENTERED",
        service: Any | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._spreadsheet_id = spreadsheet_id
        self._range_name = range_name
        self._value_input_option = value_input_option
        self._clock = clock or (lambda: datetime.now(UTC))
        if service is not None:
            self._service = service
        else:
            credentials = service_account.Credentials.from_service_account_info(
                json.loads(credentials_json),
                scopes=[_SHEETS_SCOPE],
            )
            self._service = build("sheets", "v4", credentials=credentials, cache_discovery=False)

    @classmethod
    def from_settings(cls, settings: SheetsSettings) -> GoogleSheetsTransferSink:
        return cls(
            spreadsheet_id=settings.spreadsheet_id,
            credentials_json=settings.service_account_json,
            range_name=settings.range_name,
            value_input_option=settings.value_input_option,
        )

    async def append(self, record: NormalizedTransfer) -> None:
        """Acrescenta o registro como nova linha.

        Raises:
            PersistenceFailureError: Erro HTTP ou de transporte da API.
        """
        body = {"values": [build_row(record, self._clock())]}
        try:
            response = await asyncio.to_thread(self._append_sync, body)
        except HttpError as exc:
            self._log_error(exc, status_code=_http_status(exc))
            raise PersistenceFailureError(f"sheets_http_{_http_status(exc)}") from exc
        except Exception as exc:
            self._log_error(exc)
            raise PersistenceFailureError("sheets_append_failed") from exc

        updates = response.get("updates", {}) if isinstance(response, dict) else {}
        logger.info(
            "google_sheets_row_appended",
            extra={
                "component": _COMPONENT,
                "updated_range": updates.get("updatedRange"),
                "correlation_id": get_correlation_id(),
            },
        )

    def _append_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return (
            self._service.spreadsheets()
            .values()
            .append(
                spreadsheetId=self._spreadsheet_id,
                range=self._range_name,
                valueInputOption=self._value_input_option,
                insertDataOption="INSERT_ROWS",
                body=body,
            )
            .execute()
        )

    def _log_error(self, exc: Exception, *, status_code: int | None = None) -> None:
        logger.error(
            "google_sheets_append_failed",
            extra={
                "component": _COMPONENT,
                "error_type": type(exc).__name__,
                "status_code": status_code,
                "correlation_id": get_correlation_id(),
            },
        )


def _http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None

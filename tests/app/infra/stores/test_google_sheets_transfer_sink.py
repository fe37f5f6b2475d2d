"""Testes do sink Google Sheets (service fake, sem rede)."""

from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

import pytest
from googleapiclient.errors import HttpError

from ai.models.transfer_extraction import TRANSFER_FIELDS, NormalizedTransfer, TransferType
from app.infra.stores.google_sheets_transfer_sink import (
    SHEET_HEADER,
    GoogleSheetsTransferSink,
    build_row,
)
from utils.errors import PersistenceFailureError

RECEIVED_AT = datetime(2024, 3, 15, 12, 30, tzinfo=UTC)


class _FakeRequest:
    def __init__(self, result: dict[str, Any] | Exception) -> None:
        self._result = result

    def execute(self) -> dict[str, Any]:
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class _FakeValues:
    def __init__(self, result: dict[str, Any] | Exception) -> None:
        self._result = result
        self.calls: list[dict[str, Any]] = []

    def append(self, **kwargs: Any) -> _FakeRequest:
        self.calls.append(kwargs)
        return _FakeRequest(self._result)


class _FakeService:
    def __init__(self, result: dict[str, Any] | Exception) -> None:
        self.values_api = _FakeValues(result)

    def spreadsheets(self) -> SimpleNamespace:
        return SimpleNamespace(values=lambda: self.values_api)


def _sink(result: dict[str, Any] | Exception) -> tuple[GoogleSheetsTransferSink, _FakeService]:
    service = _FakeService(result)
    sink = GoogleSheetsTransferSink(
        spreadsheet_id="sheet-id",
        credentials_json="",
        range_name="Sheet1!A:O",
        service=service,
        clock=lambda: RECEIVED_AT,
    )
    return sink, service


def test_build_row_layout() -> None:
    record = NormalizedTransfer(
        amount=8_765_000,
        cbu="0000003100012345678901",
        recipient_name="Juan Perez",
        date="15/03/2024",
    )

    row = build_row(record, RECEIVED_AT)

    assert len(row) == len(SHEET_HEADER) == len(TRANSFER_FIELDS) + 1
    assert row[0] == "2024-03-15T12:30:00+00:00"
    assert row[SHEET_HEADER.index("amount")] == 8_765_000
    assert row[SHEET_HEADER.index("cbu")] == "0000003100012345678901"
    assert row[SHEET_HEADER.index("transfer_type")] == TransferType.DIRECT.value
    assert row[SHEET_HEADER.index("dni")] == ""


@pytest.mark.asyncio
async def test_append_calls_values_append_with_user_entered() -> None:
    sink, service = _sink({"updates": {"updatedRange": "Sheet1!A2:O2"}})

    await sink.append(NormalizedTransfer(amount=1000, recipient_name="Ana"))

    call = service.values_api.calls[0]
    assert call["spreadsheetId"] == "sheet-id"
    assert call["range"] == "Sheet1!A:O"
    assert call["valueInputOption"] == "USER_ENTERED"
    assert call["insertDataOption"] == "INSERT_ROWS"
    assert call["body"]["values"][0][0] == RECEIVED_AT.isoformat()


@pytest.mark.asyncio
async def test_append_http_error_raises_persistence_failure() -> None:
    error = HttpError(SimpleNamespace(status=503, reason="unavailable"), b"{}")
    sink, _ = _sink(error)

    with pytest.raises(PersistenceFailureError, match="sheets_http_503"):
        await sink.append(NormalizedTransfer(amount=1))


@pytest.mark.asyncio
async def test_append_transport_error_raises_persistence_failure() -> None:
    sink, _ = _sink(ConnectionError("reset"))

    with pytest.raises(PersistenceFailureError, match="sheets_append_failed"):
        await sink.append(NormalizedTransfer(amount=1))

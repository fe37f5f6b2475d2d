"""Testes para endpoints da rota de webhook WhatsApp."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.connectors.whatsapp.signature import SignatureResult
from api.connectors.whatsapp.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequest,
)
from api.routes.whatsapp import webhook


def _build_request(
    *,
    method: str,
    query_string: str = "",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": "/",
        "raw_path": b"/",
        "query_string": query_string.encode("utf-8"),
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _patch_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        webhook,
        "get_whatsapp_settings",
        lambda: SimpleNamespace(
            verify_token="token",
            webhook_secret="secret",
            webhook_processing_mode="inline",
        ),
    )


def _accepted_request(raw_body: bytes, headers: dict[str, str], secret: str | None) -> WebhookRequest:
    return WebhookRequest(
        payload=json.loads(raw_body),
        signature=SignatureResult(valid=True),
        size_bytes=len(raw_body),
    )


@pytest.mark.asyncio
async def test_verify_webhook_success(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch)

    request = _build_request(
        method="GET",
        query_string="hub.mode=subscribe&hub.verify_token=token&hub.challenge=abc",
    )
    response = await webhook.verify_webhook(request)

    assert response.status_code == 200
    assert response.body == b"abc"
    assert response.media_type == "text/plain"


@pytest.mark.asyncio
async def test_verify_webhook_invalid_token(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch)

    request = _build_request(
        method="GET",
        query_string="hub.mode=subscribe&hub.verify_token=wrong&hub.challenge=abc",
    )
    response = await webhook.verify_webhook(request)

    assert response.status_code == 403
    assert response.body == b"Forbidden"


@pytest.mark.asyncio
async def test_receive_webhook_success(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    _patch_settings(monkeypatch)
    monkeypatch.setattr(webhook, "parse_webhook_request", _accepted_request)

    async def _fake_dispatch(
        *,
        payload: dict[str, object],
        correlation_id: str,
        settings: object,
    ) -> None:
        captured["payload"] = payload
        captured["correlation_id"] = correlation_id

    monkeypatch.setattr(webhook, "dispatch_inbound_processing", _fake_dispatch)

    request = _build_request(
        method="POST",
        body=b'{"object": "whatsapp_business_account", "entry": []}',
        headers={"x-correlation-id": "cid-123"},
    )

    response = await webhook.receive_webhook(request)

    assert response == {"status": "received", "correlation_id": "cid-123"}
    assert captured == {
        "payload": {"object": "whatsapp_business_account", "entry": []},
        "correlation_id": "cid-123",
    }


@pytest.mark.asyncio
async def test_receive_webhook_generates_correlation_id(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch)
    monkeypatch.setattr(webhook, "parse_webhook_request", _accepted_request)

    async def _noop_dispatch(**_: object) -> None:
        return None

    monkeypatch.setattr(webhook, "dispatch_inbound_processing", _noop_dispatch)

    response = await webhook.receive_webhook(_build_request(method="POST", body=b"{}"))

    assert response["status"] == "received"
    assert response["correlation_id"]


@pytest.mark.asyncio
async def test_receive_webhook_dispatch_failure_returns_500(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_settings(monkeypatch)
    monkeypatch.setattr(webhook, "parse_webhook_request", _accepted_request)

    async def _raise_dispatch(**_: object) -> None:
        raise RuntimeError("dispatch failed")

    monkeypatch.setattr(webhook, "dispatch_inbound_processing", _raise_dispatch)

    request = _build_request(method="POST", body=b"{}", headers={"x-correlation-id": "cid-500"})
    response = await webhook.receive_webhook(request)

    assert response.status_code == 500
    assert json.loads(response.body) == {
        "status": "error",
        "error": "internal_error",
        "correlation_id": "cid-500",
    }


@pytest.mark.asyncio
async def test_receive_webhook_invalid_signature_returns_401(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_settings(monkeypatch)

    def _raise_signature(raw_body: bytes, headers: dict[str, str], secret: str | None) -> None:
        raise InvalidSignatureError("signature_mismatch")

    monkeypatch.setattr(webhook, "parse_webhook_request", _raise_signature)

    response = await webhook.receive_webhook(_build_request(method="POST", body=b"{}"))

    assert response.status_code == 401
    assert response.body == b"Unauthorized"


@pytest.mark.asyncio
async def test_receive_webhook_invalid_json_returns_400(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch)

    def _raise_json(raw_body: bytes, headers: dict[str, str], secret: str | None) -> None:
        raise InvalidJsonError("invalid_json")

    monkeypatch.setattr(webhook, "parse_webhook_request", _raise_json)

    response = await webhook.receive_webhook(_build_request(method="POST", body=b"{not json"))

    assert response.status_code == 400
    assert response.body == b"Bad Request"


@pytest.mark.asyncio
async def test_receive_webhook_real_signature_check(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch)

    response = await webhook.receive_webhook(
        _build_request(
            method="POST",
            body=b"{}",
            headers={"x-hub-signature-256": "sha256=deadbeef"},
        )
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_receive_webhook_non_ascii_signature_returns_401(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_settings(monkeypatch)

    response = await webhook.receive_webhook(
        _build_request(
            method="POST",
            body=b"{}",
            headers={"x-hub-signature-256": "sha256=éabc"},
        )
    )

    assert response.status_code == 401

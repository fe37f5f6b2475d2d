"""Testes da validação X-Hub-Signature-256."""

from __future__ import annotations

import hashlib
import hmac

from api.connectors.whatsapp.signature import verify_meta_signature

BODY = b'{"object": "whatsapp_business_account"}'


def _sign(body: bytes, secret: str) -> str:
    return "sha256=" + hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def test_no_secret_skips_validation() -> None:
    result = verify_meta_signature(BODY, {}, None)

    assert result.valid is True
    assert result.skipped is True


def test_valid_signature() -> None:
    result = verify_meta_signature(BODY, {"x-hub-signature-256": _sign(BODY, "secret")}, "secret")

    assert result.valid is True
    assert result.skipped is False


def test_header_lookup_is_case_insensitive() -> None:
    result = verify_meta_signature(BODY, {"X-Hub-Signature-256": _sign(BODY, "secret")}, "secret")

    assert result.valid is True


def test_missing_signature() -> None:
    result = verify_meta_signature(BODY, {}, "secret")

    assert result.valid is False
    assert result.error == "missing_signature"


def test_malformed_signature() -> None:
    result = verify_meta_signature(BODY, {"x-hub-signature-256": "md5=abc"}, "secret")

    assert result.error == "malformed_signature"


def test_signature_mismatch() -> None:
    result = verify_meta_signature(BODY, {"x-hub-signature-256": _sign(BODY, "other")}, "secret")

    assert result.valid is False
    assert result.error == "signature_mismatch"


def test_non_ascii_signature_is_mismatch() -> None:
    result = verify_meta_signature(BODY, {"x-hub-signature-256": "sha256=éabc"}, "secret")

    assert result.valid is False
    assert result.error == "signature_mismatch"

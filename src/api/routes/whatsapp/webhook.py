"""Endpoints de webhook do WhatsApp.

Endpoints:
- GET /webhook/whatsapp: verificação de webhook (Meta challenge)
- POST /webhook/whatsapp: recebimento de mensagens com comprovantes

Resposta rápida (200 OK) para evitar retry da Meta; a extração e a
gravação rodam em background (modo async) ou no próprio request (inline).
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.whatsapp.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from api.connectors.whatsapp.webhook.verify import (
    WebhookChallengeError,
    verify_webhook_challenge,
)
from api.routes.whatsapp.webhook_runtime import dispatch_inbound_processing
from app.observability import correlation_scope
from config.settings import get_whatsapp_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def verify_webhook(request: Request) -> Response:
    """Responde ao challenge da Meta ou 403."""
    settings = get_whatsapp_settings()

    try:
        challenge = verify_webhook_challenge(
            request.query_params,
            expected_token=settings.verify_token,
        )
    except WebhookChallengeError as exc:
        logger.warning(
            "webhook_verification_failed",
            extra={"channel": "whatsapp", "error": str(exc)},
        )
        return Response(
            content="Forbidden",
            media_type="text/plain",
            status_code=status.HTTP_403_FORBIDDEN,
        )

    logger.info("webhook_verified", extra={"channel": "whatsapp"})
    # Meta espera o challenge como texto puro
    return Response(content=challenge, media_type="text/plain", status_code=status.HTTP_200_OK)


@router.post("/", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebe eventos inbound: valida assinatura/JSON e despacha o processamento."""
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        settings = get_whatsapp_settings()
        raw_body = await request.body()

        try:
            webhook_request = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=settings.webhook_secret or None,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"channel": "whatsapp", "correlation_id": correlation_id, "error": str(exc)},
            )
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"channel": "whatsapp", "correlation_id": correlation_id, "error": str(exc)},
            )
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            "webhook_received",
            extra={
                "channel": "whatsapp",
                "correlation_id": correlation_id,
                "object": webhook_request.object_type,
                "signature_skipped": webhook_request.signature.skipped,
                "payload_size": webhook_request.size_bytes,
            },
        )

        try:
            await dispatch_inbound_processing(
                payload=webhook_request.payload,
                correlation_id=correlation_id,
                settings=settings,
            )
        except Exception as exc:
            logger.error(
                "webhook_dispatch_failed",
                extra={"correlation_id": correlation_id, "error_type": type(exc).__name__},
            )
            return JSONResponse(
                content={"status": "error", "error": "internal_error", "correlation_id": correlation_id},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return {"status": "received", "correlation_id": correlation_id}

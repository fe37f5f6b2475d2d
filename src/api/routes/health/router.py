"""Endpoints de health check."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from api.routes.whatsapp.webhook_runtime_tasks import active_task_count, processing_task_stats
from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()

RUNNING_BANNER = "WhatsApp Transfer Tracker is running!"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    active_tasks: int
    failed_tasks: int = 0
    version: str = "1.0.0"


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Banner simples para checagem manual."""
    return RUNNING_BANNER


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
        active_tasks=active_task_count(),
        failed_tasks=processing_task_stats().failed,
    )

"""Testes do client OpenAI do extrator (AsyncOpenAI fake)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from app.infra.ai.transfer_extractor_client import OpenAITransferExtractorClient
from config.settings import OpenAISettings
from utils.errors import ExtractionUnavailableError


def _fake_openai(create: AsyncMock) -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = create
    client.close = AsyncMock()
    return client


def _completion(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(total_tokens=42),
    )


def _client(create: AsyncMock, model: str = "gpt-4o-mini") -> OpenAITransferExtractorClient:
    settings = OpenAISettings(api_key="sk-test", model=model, timeout_seconds=5.0)
    return OpenAITransferExtractorClient(settings=settings, client=_fake_openai(create))


@pytest.mark.asyncio
async def test_complete_returns_content_and_sends_prompts() -> None:
    create = AsyncMock(return_value=_completion('{"amount": 1}'))

    result = await _client(create).complete(system_prompt="sys", user_prompt="user")

    assert result == '{"amount": 1}'
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "gpt-4o-mini"
    assert kwargs["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "user"},
    ]
    assert kwargs["temperature"] == 0.0
    assert kwargs["timeout"] == 5.0


@pytest.mark.asyncio
async def test_reasoning_models_do_not_receive_temperature() -> None:
    create = AsyncMock(return_value=_completion("null"))

    await _client(create, model="o3-mini").complete(system_prompt="s", user_prompt="u")

    assert "temperature" not in create.await_args.kwargs


@pytest.mark.asyncio
async def test_timeout_maps_to_extraction_unavailable() -> None:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    create = AsyncMock(side_effect=openai.APITimeoutError(request=request))

    with pytest.raises(ExtractionUnavailableError, match="openai_timeout"):
        await _client(create).complete(system_prompt="s", user_prompt="u")


@pytest.mark.asyncio
async def test_http_status_maps_to_extraction_unavailable() -> None:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(503, request=request)
    create = AsyncMock(
        side_effect=openai.APIStatusError("unavailable", response=response, body=None)
    )

    with pytest.raises(ExtractionUnavailableError, match="openai_status_503"):
        await _client(create).complete(system_prompt="s", user_prompt="u")


@pytest.mark.asyncio
async def test_empty_content_maps_to_extraction_unavailable() -> None:
    create = AsyncMock(return_value=_completion(None))

    with pytest.raises(ExtractionUnavailableError, match="openai_empty_response"):
        await _client(create).complete(system_prompt="s", user_prompt="u")


@pytest.mark.asyncio
async def test_close_closes_underlying_client() -> None:
    create = AsyncMock()
    fake = _fake_openai(create)
    client = OpenAITransferExtractorClient(settings=OpenAISettings(api_key="k"), client=fake)

    await client.close()

    fake.close.assert_awaited_once()

"""Fakes dos colaboradores do pipeline (sem rede)."""

from __future__ import annotations

from ai.models.transfer_extraction import NormalizedTransfer
from utils.errors import PersistenceFailureError


class FakeExtractorClient:
    """Client LLM que devolve respostas pré-definidas em ordem."""

    def __init__(self, *responses: str | Exception) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, str]] = []

    async def complete(self, *, system_prompt: str, user_prompt: str) -> str:
        self.calls.append({"system_prompt": system_prompt, "user_prompt": user_prompt})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeMediaFetcher:
    def __init__(self, content: bytes = b"%PDF-1.4", error: Exception | None = None) -> None:
        self._content = content
        self._error = error
        self.calls: list[str] = []

    async def fetch(self, media_id: str) -> bytes:
        self.calls.append(media_id)
        if self._error is not None:
            raise self._error
        return self._content


class FakeDocumentTextExtractor:
    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self._text = text
        self._error = error
        self.calls: list[bytes] = []

    async def extract_text(self, content: bytes) -> str:
        self.calls.append(content)
        if self._error is not None:
            raise self._error
        return self._text


class FakeSink:
    """Sink que falha nas posições (1-based) informadas."""

    def __init__(self, fail_on: set[int] | None = None, error: Exception | None = None) -> None:
        self._fail_on = fail_on or set()
        self._error = error or PersistenceFailureError("sheets_http_503")
        self.attempts = 0
        self.records: list[NormalizedTransfer] = []

    async def append(self, record: NormalizedTransfer) -> None:
        self.attempts += 1
        if self.attempts in self._fail_on:
            raise self._error
        self.records.append(record)

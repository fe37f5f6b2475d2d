"""Extrator de JSON de respostas de LLM.

Remove cercas de markdown e parseia o JSON (objeto, array ou null).
"""

from __future__ import annotations

import json
import re
from typing import Any

from utils.errors import MalformedModelOutputError

_FENCE_RE = re.compile(r"```[a-zA-Z]*\s*\n?|```")


def strip_code_fences(response: str) -> str:
    """Remove cercas ```json / ``` e espaços extras."""
    return _FENCE_RE.sub("", response or "").strip()


def parse_model_json(response: str | None) -> Any:
    """Parseia resposta da LLM.

    Returns:
        Valor JSON (dict, list, ...) ou None se a resposta for vazia/"null".

    Raises:
        MalformedModelOutputError: Se o texto não for JSON válido.
    """
    if response is None:
        return None
    text = strip_code_fences(response)
    if not text or text == "null":
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    embedded = _slice_embedded_json(text)
    if embedded is not None:
        try:
            return json.loads(embedded)
        except json.JSONDecodeError:
            pass
    raise MalformedModelOutputError("invalid_json")


def _slice_embedded_json(text: str) -> str | None:
    """Trecho do primeiro `[`/`{` até o último fechamento correspondente."""
    starts = [index for index in (text.find("["), text.find("{")) if index != -1]
    if not starts:
        return None
    start = min(starts)
    closer = "]" if text[start] == "[" else "}"
    end = text.rfind(closer)
    if end <= start:
        return None
    return text[start : end + 1]

"""Testes do extrator de texto de PDF (pdfplumber substituído)."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from app.infra.documents import pdf_text_extractor
from app.infra.documents.pdf_text_extractor import PdfTextExtractor
from utils.errors import DocumentTextError, ExtractionUnavailableError


class _FakePdf:
    def __init__(self, page_texts: list[str | None]) -> None:
        self.pages = [SimpleNamespace(extract_text=lambda text=text: text) for text in page_texts]

    def __enter__(self) -> _FakePdf:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


def _patch_open(monkeypatch: pytest.MonkeyPatch, page_texts: list[str | None]) -> None:
    monkeypatch.setattr(
        pdf_text_extractor.pdfplumber,
        "open",
        lambda stream: _FakePdf(page_texts),
    )


@pytest.mark.asyncio
async def test_extract_text_joins_pages(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_open(monkeypatch, ["Comprobante de transferencia", None, "Monto: $ 8.765.000"])

    text = await PdfTextExtractor().extract_text(b"%PDF-1.4")

    assert text == "Comprobante de transferencia\nMonto: $ 8.765.000"


@pytest.mark.asyncio
async def test_extract_text_respects_max_pages(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_open(monkeypatch, ["p1", "p2", "p3"])

    text = await PdfTextExtractor(max_pages=2).extract_text(b"%PDF-1.4")

    assert text == "p1\np2"


@pytest.mark.asyncio
async def test_extract_text_empty_content() -> None:
    with pytest.raises(DocumentTextError, match="empty_document"):
        await PdfTextExtractor().extract_text(b"")


@pytest.mark.asyncio
async def test_extract_text_scanned_pdf_without_text(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_open(monkeypatch, [None, "  "])

    with pytest.raises(DocumentTextError, match="no_text_layer"):
        await PdfTextExtractor().extract_text(b"%PDF-1.4")


@pytest.mark.asyncio
async def test_extract_text_unreadable_pdf(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise(stream: object) -> _FakePdf:
        raise ValueError("not a pdf")

    monkeypatch.setattr(pdf_text_extractor.pdfplumber, "open", _raise)

    with pytest.raises(DocumentTextError, match="unreadable_pdf") as exc_info:
        await PdfTextExtractor().extract_text(b"garbage")
    assert isinstance(exc_info.value, ExtractionUnavailableError)

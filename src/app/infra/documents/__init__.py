"""Conversão de documentos em texto."""

from app.infra.documents.pdf_text_extractor import PdfTextExtractor

__all__ = ["PdfTextExtractor"]

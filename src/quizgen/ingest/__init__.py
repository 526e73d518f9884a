"""Document ingestion: extraction, administrative filtering and chunking."""
from __future__ import annotations

from .admin_filter import clean_text
from .chunking import chunk_text
from .extractors import DocxExtractor, PDFExtractor, TextExtractor, extract_with_timeout
from .format_detection import DocumentFormat, detect_format
from .models import SourceDocument, TextChunk

__all__ = [
    "DocumentFormat",
    "DocxExtractor",
    "PDFExtractor",
    "SourceDocument",
    "TextChunk",
    "TextExtractor",
    "chunk_text",
    "clean_text",
    "detect_format",
    "extract_with_timeout",
]

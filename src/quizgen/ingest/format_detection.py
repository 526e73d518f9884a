"""Utilities for detecting the format of uploaded documents."""
from __future__ import annotations

from enum import Enum

from quizgen.errors import UnsupportedFormat


class DocumentFormat(str, Enum):
    """Supported document formats."""

    PDF = "pdf"
    DOCX = "docx"


def detect_format(file_name: str) -> DocumentFormat:
    """Return the document format implied by the file name's extension."""

    name = (file_name or "").lower()
    for document_format in DocumentFormat:
        if name.endswith(f".{document_format.value}"):
            return document_format
    raise UnsupportedFormat("Unsupported file type. Upload .pdf or .docx")

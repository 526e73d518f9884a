"""Extractors for supported document types."""
from __future__ import annotations

import asyncio
import io
import logging
from typing import List

from docx import Document as DocxDocument
from pdfminer.high_level import extract_text as pdf_extract_text

from quizgen.errors import ExtractionFailure, ExtractionTimeout

from .format_detection import DocumentFormat, detect_format

LOGGER = logging.getLogger(__name__)


class PDFExtractor:
    """Extract text from PDF documents with pdfminer.six."""

    def extract(self, data: bytes) -> str:
        try:
            return pdf_extract_text(io.BytesIO(data)) or ""
        except Exception as error:
            LOGGER.warning("pdfminer failed to extract text: %s", error)
            raise ExtractionFailure("Could not read the PDF document") from error


class DocxExtractor:
    """Extract text from Microsoft Word documents."""

    def extract(self, data: bytes) -> str:
        try:
            document = DocxDocument(io.BytesIO(data))
        except Exception as error:
            LOGGER.warning("python-docx failed to parse DOCX content: %s", error)
            raise ExtractionFailure("Could not read the DOCX document") from error

        lines: List[str] = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                for cell in row.cells:
                    lines.extend(paragraph.text for paragraph in cell.paragraphs)
        return "\n".join(lines)


class TextExtractor:
    """Dispatch extraction by file extension and trim the result."""

    def __init__(
        self,
        pdf_extractor: PDFExtractor | None = None,
        docx_extractor: DocxExtractor | None = None,
    ) -> None:
        self.pdf_extractor = pdf_extractor or PDFExtractor()
        self.docx_extractor = docx_extractor or DocxExtractor()

    def extract(self, data: bytes, file_name: str) -> str:
        document_format = detect_format(file_name)
        if document_format is DocumentFormat.PDF:
            text = self.pdf_extractor.extract(data)
        else:
            text = self.docx_extractor.extract(data)
        return text.strip()


async def extract_with_timeout(
    extractor: TextExtractor,
    data: bytes,
    file_name: str,
    timeout: float,
) -> str:
    """Run ``extractor`` in a worker thread, failing after ``timeout`` seconds."""

    # Format errors surface before any thread is started.
    detect_format(file_name)
    try:
        return await asyncio.wait_for(asyncio.to_thread(extractor.extract, data, file_name), timeout)
    except asyncio.TimeoutError as exc:
        LOGGER.warning("Extraction of %s exceeded %.1fs", file_name, timeout)
        raise ExtractionTimeout(f"Text extraction timed out after {timeout:g}s") from exc

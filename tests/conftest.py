"""Shared fixtures and fakes for the question generation tests."""
from __future__ import annotations

import io
import json
from typing import Callable, List, Sequence, Union

import pytest

from quizgen.config import QuizGenConfig
from quizgen.llm.base import LLMClient

Response = Union[str, BaseException, Callable[[str, str], str]]


class ScriptedLLM(LLMClient):
    """Replay scripted responses; the last entry repeats once the script runs out."""

    def __init__(self, responses: Sequence[Response]) -> None:
        if not responses:
            raise ValueError("at least one response is required")
        self._responses: List[Response] = list(responses)
        self.calls: List[tuple[str, str]] = []

    @property
    def models(self) -> List[str]:
        return [model for model, _ in self.calls]

    async def complete(self, model: str, prompt: str, timeout: float) -> str:
        self.calls.append((model, prompt))
        response = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(model, prompt)
        return response


def make_question(text: str, correct_index: int = 1, options: Sequence[str] | None = None) -> dict:
    return {
        "question": text,
        "options": list(options or ["alpha", "beta", "gamma", "delta"]),
        "correctIndex": correct_index,
    }


def questions_json(count: int, prefix: str = "What does concept") -> str:
    return json.dumps({"questions": [make_question(f"{prefix} {index} describe?") for index in range(count)]})


@pytest.fixture
def config() -> QuizGenConfig:
    return QuizGenConfig(api_key="test-key", llm_provider="mock")


@pytest.fixture
def docx_bytes() -> bytes:
    docx_mod = pytest.importorskip("docx", reason="python-docx is required for DOCX tests")
    document = docx_mod.Document()
    document.add_paragraph("Photosynthesis converts light energy into chemical energy.")
    document.add_paragraph("Chlorophyll absorbs mostly blue and red light.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Stomata"
    table.rows[0].cells[1].text = "Gas exchange"
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def pdf_bytes() -> bytes:
    # Minimal PDF document with extractable text "Hello PDF"
    return (
        b"%PDF-1.4\n"
        b"1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n"
        b"2 0 obj\n<< /Type /Pages /Kids [3 0 R] /Count 1 >>\nendobj\n"
        b"3 0 obj\n<< /Type /Page /Parent 2 0 R /MediaBox [0 0 200 200] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>\nendobj\n"
        b"4 0 obj\n<< /Length 53 >>\nstream\nBT /F1 12 Tf 72 120 Td (Hello PDF) Tj ET\nendstream\nendobj\n"
        b"5 0 obj\n<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>\nendobj\n"
        b"xref\n0 6\n0000000000 65535 f \n0000000010 00000 n \n0000000059 00000 n \n0000000110 00000 n \n"
        b"0000000276 00000 n \n0000000393 00000 n \ntrailer\n<< /Size 6 /Root 1 0 R >>\nstartxref\n452\n%%EOF\n"
    )

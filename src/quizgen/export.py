"""CSV export of generated questions in a quiz-plugin import layout."""
from __future__ import annotations

import csv
import io
import re
from typing import Iterable

from quizgen.generation.models import Question

CSV_HEADER: tuple[str, ...] = (
    "ID",
    "Title",
    "Category",
    "Type",
    "Post Content",
    "Status",
    "Menu Order",
    "Options",
    "Answer",
)

_UNSAFE_FILENAME_CHARS_RE = re.compile(r"[^a-z0-9_-]+", re.IGNORECASE)


def questions_to_csv(questions: Iterable[Question], category: str = "") -> str:
    """Render one single-choice row per question; every field is quoted."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\r\n")
    writer.writerow(CSV_HEADER)
    for question in questions:
        writer.writerow(
            (
                "",
                question.question,
                category,
                "single-choice",
                question.question,
                "publish",
                1,
                "|".join(question.options),
                question.correct_answer,
            )
        )
    return buffer.getvalue().removesuffix("\r\n")


def export_filename(category: str = "") -> str:
    if not category:
        return "questions.csv"
    return f"questions-{_UNSAFE_FILENAME_CHARS_RE.sub('_', category)}.csv"


__all__ = ["CSV_HEADER", "export_filename", "questions_to_csv"]

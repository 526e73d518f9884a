"""Validation, filtering, deduplication and capping of generated questions."""
from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from quizgen.telemetry import emit_postprocess_event

from .models import Question

LOGGER = logging.getLogger(__name__)

ADMIN_TOKENS: tuple[str, ...] = (
    "credit",
    "credits",
    "cpe",
    "ce hours",
    "course number",
    "course id",
    "provider",
    "nasba",
    "approved",
    "sponsor",
    "author",
    "contact",
    "support",
)

_ADMIN_TOKEN_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(token).replace(r"\ ", r"\s+") for token in ADMIN_TOKENS) + r")\b",
    re.IGNORECASE,
)


def is_administrative(question: Question) -> bool:
    return _ADMIN_TOKEN_RE.search(question.searchable_text()) is not None


@dataclass(slots=True)
class PostProcessStats:
    candidates: int = 0
    invalid: int = 0
    administrative: int = 0
    duplicates: int = 0
    returned: int = 0


@dataclass(slots=True)
class PostProcessResult:
    questions: List[Question]
    stats: PostProcessStats


class PostProcessor:
    """Turn raw candidates from every chunk into the final question list.

    The processor holds no per-request state; counts for one call are carried
    in the :class:`PostProcessStats` passed through each stage and returned
    with the result.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def validate(self, candidates: Iterable[Any], stats: PostProcessStats) -> List[Question]:
        questions: List[Question] = []
        for candidate in candidates:
            try:
                questions.append(Question.model_validate(candidate))
            except ValidationError as error:
                LOGGER.debug("Discarding malformed question candidate: %s", error)
                stats.invalid += 1
        return questions

    def drop_administrative(self, questions: Iterable[Question], stats: PostProcessStats) -> List[Question]:
        kept: List[Question] = []
        for question in questions:
            if is_administrative(question):
                stats.administrative += 1
                continue
            kept.append(question)
        return kept

    def deduplicate(self, questions: Iterable[Question], stats: PostProcessStats) -> List[Question]:
        seen: set[str] = set()
        unique: List[Question] = []
        for question in questions:
            key = question.question.strip()
            if key in seen:
                stats.duplicates += 1
                continue
            seen.add(key)
            unique.append(question)
        return unique

    def finalize(
        self,
        candidates: Iterable[Any],
        desired_total: int,
        *,
        req_id: str | None = None,
    ) -> PostProcessResult:
        candidates = list(candidates)
        stats = PostProcessStats(candidates=len(candidates))

        questions = self.validate(candidates, stats)
        questions = self.drop_administrative(questions, stats)
        questions = self.deduplicate(questions, stats)
        self._rng.shuffle(questions)
        result = questions[: max(desired_total, 0)]

        stats.returned = len(result)
        emit_postprocess_event(
            req_id=req_id or "",
            candidates=stats.candidates,
            invalid=stats.invalid,
            administrative=stats.administrative,
            duplicates=stats.duplicates,
            returned=stats.returned,
        )
        return PostProcessResult(questions=result, stats=stats)


__all__ = ["ADMIN_TOKENS", "PostProcessResult", "PostProcessStats", "PostProcessor", "is_administrative"]

from __future__ import annotations

import logging
import random
import time
import uuid
from typing import Callable, Optional

from quizgen.config import QuizGenConfig
from quizgen.errors import EmptyDocument, InvalidInput
from quizgen.generation.budget import TimeBudget
from quizgen.generation.models import ResultSet
from quizgen.generation.orchestrator import GenerationOrchestrator
from quizgen.generation.postprocess import PostProcessor
from quizgen.ingest.admin_filter import clean_text
from quizgen.ingest.chunking import chunk_text
from quizgen.ingest.extractors import TextExtractor, extract_with_timeout
from quizgen.ingest.models import SourceDocument
from quizgen.llm.base import LLMClient
from quizgen.telemetry import (
    emit_chunking_event,
    emit_cleaning_event,
    emit_extraction_event,
    traced_duration,
)

LOGGER = logging.getLogger(__name__)


class QuestionPipeline:
    """Request-level orchestration from uploaded document to final questions."""

    def __init__(
        self,
        config: QuizGenConfig,
        llm: LLMClient,
        *,
        extractor: TextExtractor | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.extractor = extractor or TextExtractor()
        self.orchestrator = GenerationOrchestrator(llm, config)
        self.postprocessor = PostProcessor(rng)
        self.clock = clock

    async def run(
        self,
        document: SourceDocument,
        requested_count: int,
        requested_model: Optional[str] = None,
        *,
        started_at: Optional[float] = None,
    ) -> ResultSet:
        if requested_count < 1:
            raise InvalidInput("Invalid count")

        req_id = uuid.uuid4().hex
        budget = TimeBudget(self.config.request_budget, clock=self.clock, started_at=started_at)
        model = self.config.resolve_model(requested_model)

        with traced_duration("pipeline", logger=LOGGER, req_id=req_id, file=document.file_name):
            return await self._run(document, requested_count, model, budget, req_id)

    async def _run(
        self,
        document: SourceDocument,
        requested_count: int,
        model: str,
        budget: TimeBudget,
        req_id: str,
    ) -> ResultSet:
        extract_started = time.perf_counter()
        raw_text = await extract_with_timeout(
            self.extractor,
            document.data,
            document.file_name,
            self.config.extraction_timeout,
        )
        emit_extraction_event(
            req_id=req_id,
            file_name=document.file_name,
            size_bytes=document.size_bytes,
            duration_ms=(time.perf_counter() - extract_started) * 1000.0,
            chars=len(raw_text),
        )
        if not raw_text:
            raise EmptyDocument("Empty document")

        cleaned = clean_text(raw_text)
        emit_cleaning_event(req_id=req_id, chars_before=len(raw_text), chars_after=len(cleaned))

        chunks = chunk_text(cleaned, self.config.chunk_max_chars, self.config.chunk_overlap_chars)
        emit_chunking_event(
            req_id=req_id,
            chunks=len(chunks),
            max_chars=self.config.chunk_max_chars,
            overlap_chars=self.config.chunk_overlap_chars,
        )
        if not chunks:
            LOGGER.warning("Document %s has no instructional text after cleaning", document.file_name)

        outcome = await self.orchestrator.generate(chunks, requested_count, model, budget, req_id=req_id)
        final = self.postprocessor.finalize(outcome.candidates, outcome.desired_total, req_id=req_id)
        questions = final.questions
        LOGGER.info(
            "Returning %s questions from %s/%s chunks using %s",
            len(questions),
            outcome.chunks_processed,
            outcome.chunks_total,
            outcome.model_used,
        )
        return ResultSet(
            model_used=outcome.model_used,
            questions=questions,
            chunks_total=outcome.chunks_total,
            chunks_processed=outcome.chunks_processed,
            stopped_early=outcome.stopped_early,
        )

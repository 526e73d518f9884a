"""Per-chunk model invocation under chunk, time and fallback limits."""
from __future__ import annotations

import asyncio
import logging
import math
import time
from typing import List, Sequence

from quizgen.config import QuizGenConfig
from quizgen.errors import ModelAccessDenied, ModelCallTimeout
from quizgen.ingest.models import TextChunk
from quizgen.llm.base import LLMClient
from quizgen.telemetry import emit_budget_stop, emit_model_call, emit_model_fallback

from .budget import TimeBudget
from .models import GenerationOutcome, GenerationRequest
from .prompt_builder import build_prompt
from .response_parser import extract_candidates, parse_model_output

LOGGER = logging.getLogger(__name__)


def desired_total(requested_count: int, hard_cap: int) -> int:
    return min(requested_count, hard_cap)


def per_chunk_target(total: int, chunks_to_process: int) -> int:
    if chunks_to_process <= 0:
        return 0
    return max(1, math.ceil(total / chunks_to_process))


class GenerationOrchestrator:
    """Ask the model for questions chunk by chunk, in document order.

    Chunks beyond ``config.max_chunks`` are dropped. Before each chunk the
    remaining budget is checked against ``config.safety_margin``; once it runs
    short the loop stops and whatever was collected is returned. The first
    :class:`ModelAccessDenied` switches to ``config.fallback_model`` and retries
    the same chunk once; every other failure propagates.
    """

    def __init__(self, llm: LLMClient, config: QuizGenConfig) -> None:
        self.llm = llm
        self.config = config

    async def generate(
        self,
        chunks: Sequence[TextChunk],
        requested_count: int,
        model: str,
        budget: TimeBudget,
        *,
        req_id: str = "",
    ) -> GenerationOutcome:
        selected = list(chunks[: self.config.max_chunks])
        if len(selected) < len(chunks):
            LOGGER.info("Processing %s of %s chunks", len(selected), len(chunks))

        total = desired_total(requested_count, self.config.max_questions)
        outcome = GenerationOutcome(
            model_used=model,
            chunks_total=len(chunks),
            desired_total=total,
        )
        target = per_chunk_target(total, len(selected))
        fallback_used = False

        for chunk in selected:
            remaining = budget.remaining()
            if remaining < self.config.safety_margin:
                emit_budget_stop(req_id=req_id, chunk_index=chunk.index, remaining_seconds=remaining)
                outcome.stopped_early = True
                break

            request = GenerationRequest(
                chunk_index=chunk.index,
                chunk_text=chunk.text,
                target_count=target,
                model=outcome.model_used,
            )
            started = time.perf_counter()
            try:
                raw = await self._call(request)
            except ModelAccessDenied:
                if fallback_used:
                    raise
                fallback_used = True
                emit_model_fallback(
                    req_id=req_id,
                    chunk_index=chunk.index,
                    from_model=request.model,
                    to_model=self.config.fallback_model,
                )
                outcome.model_used = self.config.fallback_model
                request.model = self.config.fallback_model
                raw = await self._call(request)

            candidates = extract_candidates(parse_model_output(raw))
            outcome.candidates.extend(candidates)
            outcome.chunks_processed += 1
            emit_model_call(
                req_id=req_id,
                chunk_index=chunk.index,
                model=request.model,
                target=target,
                duration_ms=(time.perf_counter() - started) * 1000.0,
                candidates=len(candidates),
            )

        return outcome

    async def _call(self, request: GenerationRequest) -> str:
        prompt = build_prompt(request.chunk_text, request.target_count)
        timeout = self.config.model_timeout
        try:
            return await asyncio.wait_for(self.llm.complete(request.model, prompt, timeout), timeout)
        except asyncio.TimeoutError as exc:
            raise ModelCallTimeout(f"Model call timed out after {timeout:g}s") from exc


__all__ = ["GenerationOrchestrator", "desired_total", "per_chunk_target"]

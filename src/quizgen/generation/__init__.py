"""Question generation: prompts, model orchestration, parsing and post-processing."""
from __future__ import annotations

from .budget import TimeBudget
from .models import GenerationOutcome, GenerationRequest, Question, ResultSet
from .orchestrator import GenerationOrchestrator, desired_total, per_chunk_target
from .postprocess import PostProcessResult, PostProcessStats, PostProcessor
from .response_parser import extract_candidates, parse_model_output

__all__ = [
    "GenerationOrchestrator",
    "GenerationOutcome",
    "GenerationRequest",
    "PostProcessResult",
    "PostProcessStats",
    "PostProcessor",
    "Question",
    "ResultSet",
    "TimeBudget",
    "desired_total",
    "extract_candidates",
    "parse_model_output",
    "per_chunk_target",
]

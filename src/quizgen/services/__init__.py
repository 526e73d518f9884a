"""Service layer wiring the ingestion and generation stages together."""
from __future__ import annotations

from .pipeline import QuestionPipeline

__all__ = ["QuestionPipeline"]

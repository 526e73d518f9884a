"""Utilities for constructing per-chunk question generation prompts."""
from __future__ import annotations

from pathlib import Path

_PROMPT_DIR = Path(__file__).resolve().parents[1] / "prompts"
_QUESTIONS_PROMPT_PATH = _PROMPT_DIR / "questions.md"


def _load_template(path: Path) -> str:
    """Read and trim the contents of a template file."""
    return path.read_text(encoding="utf-8").strip()


_QUESTIONS_TEMPLATE = _load_template(_QUESTIONS_PROMPT_PATH)


def build_prompt(chunk_text: str, count: int) -> str:
    """Compose the prompt asking for ``count`` questions about ``chunk_text``."""

    if chunk_text is None:
        raise ValueError("chunk_text must not be None")
    if count < 1:
        raise ValueError("count must be a positive integer")

    return _QUESTIONS_TEMPLATE.format(count=count, content=chunk_text.strip())


__all__ = ["build_prompt"]

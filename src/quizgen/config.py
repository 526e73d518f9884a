"""Process-wide configuration loaded from environment variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-5-mini"
FALLBACK_MODEL = "gpt-4o-mini"
ALLOWED_MODELS: tuple[str, ...] = ("gpt-5-mini", "gpt-4o-mini", "o4-mini")

DEFAULT_MAX_CHUNKS = 6
CONSTRAINED_MAX_CHUNKS = 3

_CONSTRAINED_ENV_KEYS: tuple[str, ...] = ("VERCEL", "QUIZGEN_CONSTRAINED")


def _env_flag(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _int_from_env(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        LOGGER.warning("Invalid integer for %s: %s; using default %s", name, value, default)
        return default


def _float_from_env(environ: Mapping[str, str], name: str, default: float) -> float:
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        LOGGER.warning("Invalid float for %s: %s; using default %s", name, value, default)
        return default


def _models_from_env(environ: Mapping[str, str], name: str) -> tuple[str, ...]:
    value = environ.get(name)
    if not value:
        return ALLOWED_MODELS
    models = tuple(item.strip() for item in value.split(",") if item.strip())
    return models or ALLOWED_MODELS


@dataclass(frozen=True, slots=True)
class QuizGenConfig:
    """Read-only settings passed into the pipeline for every request."""

    api_key: Optional[str] = None
    llm_provider: str = "openai"
    default_model: str = DEFAULT_MODEL
    fallback_model: str = FALLBACK_MODEL
    allowed_models: tuple[str, ...] = ALLOWED_MODELS
    max_chunks: int = DEFAULT_MAX_CHUNKS
    max_questions: int = 10
    model_timeout: float = 25.0
    extraction_timeout: float = 12.0
    request_budget: float = 60.0
    safety_margin: float = 8.0
    chunk_max_chars: int = 6000
    chunk_overlap_chars: int = 100
    constrained: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "QuizGenConfig":
        """Build the configuration from ``environ`` (defaults to ``os.environ``)."""

        env = os.environ if environ is None else environ
        constrained = any(_env_flag(env, key) for key in _CONSTRAINED_ENV_KEYS)
        default_chunks = CONSTRAINED_MAX_CHUNKS if constrained else DEFAULT_MAX_CHUNKS
        allowed = _models_from_env(env, "QUIZGEN_ALLOWED_MODELS")
        default_model = env.get("QUIZGEN_DEFAULT_MODEL", "").strip() or DEFAULT_MODEL
        if default_model not in allowed:
            LOGGER.warning(
                "Default model %s is not in the allowlist %s; using %s", default_model, allowed, allowed[0]
            )
            default_model = allowed[0]

        return cls(
            api_key=env.get("OPENAI_API_KEY") or None,
            llm_provider=env.get("LLM_PROVIDER", "openai").strip().lower() or "openai",
            default_model=default_model,
            fallback_model=env.get("QUIZGEN_FALLBACK_MODEL", "").strip() or FALLBACK_MODEL,
            allowed_models=allowed,
            max_chunks=max(1, _int_from_env(env, "MAX_CHUNKS", default_chunks)),
            max_questions=max(1, _int_from_env(env, "MAX_QUESTIONS", 10)),
            model_timeout=_float_from_env(env, "MODEL_TIMEOUT_SECONDS", 25.0),
            extraction_timeout=_float_from_env(env, "EXTRACTION_TIMEOUT_SECONDS", 12.0),
            request_budget=_float_from_env(env, "REQUEST_BUDGET_SECONDS", 60.0),
            safety_margin=_float_from_env(env, "BUDGET_SAFETY_MARGIN_SECONDS", 8.0),
            chunk_max_chars=_int_from_env(env, "CHUNK_MAX_CHARS", 6000),
            chunk_overlap_chars=_int_from_env(env, "CHUNK_OVERLAP_CHARS", 100),
            constrained=constrained,
        )

    def resolve_model(self, requested: Optional[str]) -> str:
        """Return ``requested`` when allowlisted, otherwise the default model."""

        candidate = (requested or "").strip()
        if candidate in self.allowed_models:
            return candidate
        if candidate:
            LOGGER.info("Model %s is not allowed; using default %s", candidate, self.default_model)
        return self.default_model


__all__ = ["ALLOWED_MODELS", "DEFAULT_MODEL", "FALLBACK_MODEL", "QuizGenConfig"]

"""Structured lifecycle logging for the question generation pipeline."""

from __future__ import annotations

import logging
import time
import traceback
from contextlib import contextmanager
from typing import Any, Iterator, Optional

LOGGER = logging.getLogger("quizgen.telemetry")


def _format_exception(error: BaseException) -> str:
    return "".join(traceback.format_exception(error.__class__, error, error.__traceback__))


def log_event(
    logger: Optional[logging.Logger],
    step: str,
    *,
    level: str = "info",
    req_id: str | None = None,
    duration_ms: float | None = None,
    exc: BaseException | str | None = None,
    details: dict[str, Any] | None = None,
    **payload: Any,
) -> None:
    """Emit a structured log event with the agreed-upon schema."""

    logger = logger or LOGGER
    event: dict[str, Any] = {"step": step, "module": logger.name}
    if req_id:
        event["req_id"] = req_id
    if duration_ms is not None:
        event["duration_ms"] = round(duration_ms, 3)
    if details is not None:
        event["details"] = details
    event.update(payload)

    exc_info = None
    if exc is not None:
        if isinstance(exc, BaseException):
            event["exc"] = _format_exception(exc)
            exc_info = (exc.__class__, exc, exc.__traceback__)
        else:
            event["exc"] = str(exc)

    log_method = getattr(logger, level.lower(), logger.info)
    log_method(event, exc_info=exc_info)


def emit_extraction_event(
    *,
    req_id: str,
    file_name: str,
    size_bytes: int,
    duration_ms: float,
    chars: int,
) -> None:
    details = {"file": file_name, "size_bytes": size_bytes, "chars": chars}
    log_event(LOGGER, "extract.complete", req_id=req_id, duration_ms=duration_ms, details=details)


def emit_cleaning_event(*, req_id: str, chars_before: int, chars_after: int) -> None:
    details = {
        "chars_before": chars_before,
        "chars_after": chars_after,
        "removed": chars_before - chars_after,
    }
    log_event(LOGGER, "clean.complete", req_id=req_id, details=details)


def emit_chunking_event(*, req_id: str, chunks: int, max_chars: int, overlap_chars: int) -> None:
    details = {"chunks": chunks, "max_chars": max_chars, "overlap_chars": overlap_chars}
    log_event(LOGGER, "chunk.complete", req_id=req_id, details=details)


def emit_model_call(
    *,
    req_id: str,
    chunk_index: int,
    model: str,
    target: int,
    duration_ms: float,
    candidates: int,
) -> None:
    details = {
        "chunk_index": chunk_index,
        "model": model,
        "target": target,
        "candidates": candidates,
    }
    log_event(LOGGER, "generate.chunk", req_id=req_id, duration_ms=duration_ms, details=details)


def emit_model_fallback(*, req_id: str, chunk_index: int, from_model: str, to_model: str) -> None:
    details = {"chunk_index": chunk_index, "from_model": from_model, "to_model": to_model}
    log_event(LOGGER, "generate.fallback", level="warning", req_id=req_id, details=details)


def emit_budget_stop(*, req_id: str, chunk_index: int, remaining_seconds: float) -> None:
    details = {"chunk_index": chunk_index, "remaining_seconds": round(remaining_seconds, 3)}
    log_event(LOGGER, "generate.budget_exhausted", level="warning", req_id=req_id, details=details)


def emit_postprocess_event(
    *,
    req_id: str,
    candidates: int,
    invalid: int,
    administrative: int,
    duplicates: int,
    returned: int,
) -> None:
    details = {
        "candidates": candidates,
        "invalid": invalid,
        "administrative": administrative,
        "duplicates": duplicates,
        "returned": returned,
    }
    log_event(LOGGER, "postprocess.complete", req_id=req_id, details=details)


def emit_exception(
    *,
    module: str,
    error: BaseException,
    req_id: str | None = None,
) -> None:
    log_event(
        LOGGER,
        "exception",
        level="error",
        req_id=req_id,
        details={"module": module},
        exc=error,
    )


@contextmanager
def traced_duration(step: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[None]:
    start = time.perf_counter()
    log_event(logger or LOGGER, f"{step}.start", details=fields)
    try:
        yield
    except Exception as error:
        log_event(logger or LOGGER, f"{step}.error", level="error", details=fields, exc=error)
        raise
    finally:
        end = time.perf_counter()
        log_event(
            logger or LOGGER,
            f"{step}.complete",
            duration_ms=(end - start) * 1000.0,
            details=fields,
        )

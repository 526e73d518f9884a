"""Recover structured question payloads from free-form model output."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

LOGGER = logging.getLogger(__name__)

_FENCED_JSON_RE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)

ParseStrategy = Callable[[str], Optional[Dict[str, Any]]]


def _loads_object(candidate: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(candidate)
    except (TypeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_direct(text: str) -> Optional[Dict[str, Any]]:
    return _loads_object(text)


def parse_fenced_block(text: str) -> Optional[Dict[str, Any]]:
    match = _FENCED_JSON_RE.search(text)
    if match is None:
        return None
    return _loads_object(match.group(1))


def parse_brace_span(text: str) -> Optional[Dict[str, Any]]:
    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last <= first:
        return None
    return _loads_object(text[first : last + 1])


DEFAULT_STRATEGIES: tuple[ParseStrategy, ...] = (parse_direct, parse_fenced_block, parse_brace_span)


def empty_payload() -> Dict[str, Any]:
    return {"questions": []}


def parse_model_output(
    text: str,
    strategies: Sequence[ParseStrategy] = DEFAULT_STRATEGIES,
) -> Dict[str, Any]:
    """Return the first JSON object any strategy recovers from ``text``.

    Malformed output never raises; it yields ``{"questions": []}`` so the
    affected chunk simply contributes nothing.
    """

    for strategy in strategies:
        payload = strategy(text or "")
        if payload is not None:
            return payload
    LOGGER.warning("Model output contained no JSON object (%s chars)", len(text or ""))
    return empty_payload()


def extract_candidates(payload: Dict[str, Any]) -> List[Any]:
    questions = payload.get("questions")
    return list(questions) if isinstance(questions, list) else []

"""Deterministic model client for offline development and tests."""
from __future__ import annotations

import json
import re
from collections import deque

from .base import LLMClient

RECENT_CALLS_KEPT = 50

_TARGET_RE = re.compile(r"generate (\d+) multiple-choice questions")
_CONTENT_RE = re.compile(r'Course content:\s*"""(.*)"""', re.DOTALL)


class MockLLMClient(LLMClient):
    """Return canned questions derived from the prompt's course content."""

    def __init__(self) -> None:
        self.calls: deque[tuple[str, str]] = deque(maxlen=RECENT_CALLS_KEPT)
        self.call_count = 0

    async def complete(self, model: str, prompt: str, timeout: float) -> str:
        del timeout  # Nothing to wait for.
        self.calls.append((model, prompt))
        self.call_count += 1
        target_match = _TARGET_RE.search(prompt)
        target = int(target_match.group(1)) if target_match else 1
        content_match = _CONTENT_RE.search(prompt)
        words = (content_match.group(1) if content_match else prompt).split()

        questions = []
        for index in range(target):
            word = words[index % len(words)].strip(".,;:()\"'") if words else "topic"
            questions.append(
                {
                    "question": f"Which statement about '{word}' (item {self.call_count}.{index + 1}) is correct?",
                    "options": [
                        f"It appears in the course material as {word}",
                        "It is never discussed",
                        "It is unrelated to the topic",
                        "It contradicts the material",
                    ],
                    "correctIndex": 0,
                }
            )
        return json.dumps({"questions": questions})

"""Abstract model-call capability used by the generation orchestrator."""
from __future__ import annotations

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Common contract for text generation backends.

    Implementations raise :class:`~quizgen.errors.ModelAccessDenied` when the
    provider refuses the model, :class:`~quizgen.errors.ModelCallTimeout` when
    the call runs past ``timeout`` and :class:`~quizgen.errors.ModelCallFailure`
    for anything else.
    """

    @abstractmethod
    async def complete(self, model: str, prompt: str, timeout: float) -> str:
        """Submit ``prompt`` to ``model`` and return the raw response text."""

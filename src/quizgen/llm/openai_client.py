"""OpenAI-backed implementation of the model-call capability."""
from __future__ import annotations

import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from quizgen.errors import ModelAccessDenied, ModelCallFailure, ModelCallTimeout

from .base import LLMClient

LOGGER = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are an expert exam author. Output only what is asked."


class OpenAIClient(LLMClient):
    """Call OpenAI Chat Completions and return the assistant message text."""

    def __init__(self, api_key: Optional[str] = None, client: Optional[AsyncOpenAI] = None) -> None:
        self._api_key = api_key
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise ModelCallFailure("OPENAI_API_KEY is not set")
            self._client = AsyncOpenAI(api_key=self._api_key, max_retries=0)
        return self._client

    async def complete(self, model: str, prompt: str, timeout: float) -> str:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                timeout=timeout,
            )
        except openai.PermissionDeniedError as exc:
            LOGGER.warning("Access to model %s denied: %s", model, exc)
            raise ModelAccessDenied(f"Model {model} is not available for this API key") from exc
        except openai.APITimeoutError as exc:
            raise ModelCallTimeout(f"Model call timed out after {timeout:g}s") from exc
        except openai.OpenAIError as exc:
            raise ModelCallFailure(f"Model call failed: {exc}") from exc

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

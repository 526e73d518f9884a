"""Model-call capability: abstract client plus OpenAI and mock backends."""

from quizgen.config import QuizGenConfig

from .base import LLMClient
from .mock import MockLLMClient
from .openai_client import OpenAIClient


def create_llm_client(config: QuizGenConfig) -> LLMClient:
    """Return the backend selected by ``config.llm_provider``."""

    if config.llm_provider == "mock":
        return MockLLMClient()
    return OpenAIClient(api_key=config.api_key)


__all__ = ["LLMClient", "MockLLMClient", "OpenAIClient", "create_llm_client"]

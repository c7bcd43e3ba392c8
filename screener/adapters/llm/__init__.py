"""LLM adapter layer - isolates the remote model behind a narrow interface."""

from screener.adapters.llm.base import AbstractLLMClient
from screener.adapters.llm.factory import create_llm_client
from screener.adapters.llm.openai_client import OpenAIClient

__all__ = [
    "AbstractLLMClient",
    "OpenAIClient",
    "create_llm_client",
]

"""Factory for the remote model client."""

from screener.adapters.llm.base import AbstractLLMClient
from screener.adapters.llm.openai_client import OpenAIClient
from screener.core.config import settings
from screener.core.errors import ValidationAppError


def create_llm_client() -> AbstractLLMClient:
    """Instantiate the configured LLM client.

    Called once at startup. A missing credential is fatal: the application
    refuses to initialise rather than failing on the first analysis.

    Returns:
        AbstractLLMClient: Configured LLM client instance.

    Raises:
        ValidationAppError: If the API key is missing or the provider is unknown.
    """
    provider = settings.llm.provider.lower()

    if provider == "openai":
        if not settings.llm.api_key:
            raise ValidationAppError(
                code="llm_missing_api_key",
                title="Configuration Error",
                message="LLM_API_KEY environment variable is not set",
                details={"provider": provider},
            )
        return OpenAIClient(
            api_key=settings.llm.api_key,
            model=settings.llm.model,
            base_url=settings.llm.base_url,
            timeout_seconds=settings.llm.timeout_seconds,
        )

    raise ValidationAppError(
        code="llm_unknown_provider",
        title="Configuration Error",
        message=f"Unknown LLM provider: '{provider}'. Supported providers: openai",
    )

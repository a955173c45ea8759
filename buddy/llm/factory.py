"""LLM factory for creating LLM instances."""

from buddy.config import LLMConfig
from buddy.llm.base import BaseLLM
from buddy.llm.claude import ClaudeLLM
from buddy.llm.openai_chat import OpenAIChatLLM

SUPPORTED_PROVIDERS = ("openai", "claude", "auto")


def create_llm(config: LLMConfig) -> BaseLLM:
    """Create LLM instance from configuration.

    With provider "auto" the OpenAI key wins when both keys are present.

    Args:
        config: LLM section of the application config

    Returns:
        BaseLLM instance configured with the provided settings

    Raises:
        ValueError: If the provider is not supported or its API key is missing
    """
    provider = (config.provider or "auto").lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported LLM provider: {provider}. Supported: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    if provider == "auto":
        if config.openai_api_key:
            provider = "openai"
        elif config.anthropic_api_key:
            provider = "claude"
        else:
            raise ValueError("No LLM API key configured (set OPENAI_API_KEY or ANTHROPIC_API_KEY)")

    common = dict(
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        timeout=config.timeout,
    )

    if provider == "openai":
        return OpenAIChatLLM(
            model=config.model or OpenAIChatLLM.DEFAULT_MODEL,
            api_key=config.openai_api_key or "",
            base_url=config.openai_base_url,
            **common,
        )
    return ClaudeLLM(
        model=config.model or ClaudeLLM.DEFAULT_MODEL,
        api_key=config.anthropic_api_key or "",
        base_url=config.anthropic_base_url,
        **common,
    )

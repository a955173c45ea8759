"""Anthropic Claude implementation using the Messages API."""

import logging
from typing import List, Optional

import httpx

from buddy.errors import ProviderError
from buddy.llm.base import BaseLLM, LLMResponse, Message, ToolCall, ToolDefinition

logger = logging.getLogger(__name__)


class ClaudeLLM(BaseLLM):
    """Anthropic Claude chat model with tool use."""

    DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
    API_VERSION = "2023-06-01"

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str = "",
        base_url: str = "https://api.anthropic.com/v1",
        temperature: float = 0.7,
        max_tokens: int = 1024,
        timeout: float = 30.0,
    ):
        """Initialize Claude LLM.

        Args:
            model: Model name (e.g., "claude-3-5-sonnet-20241022")
            api_key: Anthropic API key
            base_url: API base URL
            temperature: Sampling temperature (0.0 - 1.0)
            max_tokens: Maximum tokens to generate
            timeout: Request timeout in seconds
        """
        super().__init__(model=model, temperature=temperature, max_tokens=max_tokens, timeout=timeout)
        if not api_key:
            raise ValueError("Anthropic API key is required for Claude LLM")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def chat(
        self,
        messages: List[Message],
        tools: Optional[List[ToolDefinition]] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        # The Messages API takes the system prompt as a top-level field
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        data = {
            "model": self.model,
            "messages": [m.to_dict() for m in messages if m.role != "system"],
            "temperature": temperature if temperature is not None else self.temperature,
            "max_tokens": max_tokens if max_tokens is not None else self.max_tokens,
        }
        if system:
            data["system"] = system
        if tools:
            data["tools"] = [
                {"name": t.name, "description": t.description, "input_schema": t.input_schema}
                for t in tools
            ]

        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": self.API_VERSION,
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(f"{self._base_url}/messages", json=data, headers=headers)
                response.raise_for_status()
                result = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Claude API error: {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.TimeoutException as e:
            raise ProviderError(f"Claude API timed out after {self.timeout}s") from e
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Claude request failed: {e}") from e

        return self._parse(result)

    def _parse(self, result: dict) -> LLMResponse:
        """Join text blocks and collect tool_use blocks."""
        try:
            blocks = result["content"]
            text = "".join(b["text"] for b in blocks if b.get("type") == "text")
            tool_calls = [
                ToolCall(id=b["id"], name=b["name"], input=b.get("input") or {})
                for b in blocks
                if b.get("type") == "tool_use"
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderError(f"Unexpected Claude API response format: {result}") from e

        usage = result.get("usage") or {}
        tokens = None
        if "input_tokens" in usage or "output_tokens" in usage:
            tokens = usage.get("input_tokens", 0) + usage.get("output_tokens", 0)

        if tool_calls:
            logger.debug("Model requested tools: %s", [c.name for c in tool_calls])

        return LLMResponse(
            content=text,
            model=result.get("model", self.model),
            tool_calls=tool_calls,
            tokens_used=tokens,
            finish_reason=result.get("stop_reason"),
        )

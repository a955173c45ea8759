"""OpenAI chat completions implementation."""

import json
import logging
from typing import List, Optional

import httpx

from buddy.errors import ProviderError
from buddy.llm.base import BaseLLM, LLMResponse, Message, ToolCall, ToolDefinition

logger = logging.getLogger(__name__)


class OpenAIChatLLM(BaseLLM):
    """OpenAI chat model with function calling.

    Works against any endpoint exposing the ``/chat/completions`` API.
    """

    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str = "",
        base_url: str = "https://api.openai.com/v1",
        temperature: float = 0.7,
        max_tokens: int = 1024,
        timeout: float = 30.0,
    ):
        """Initialize OpenAI LLM.

        Args:
            model: Model name (e.g., "gpt-4o-mini")
            api_key: OpenAI API key
            base_url: API base URL
            temperature: Sampling temperature (0.0 - 1.0)
            max_tokens: Maximum tokens to generate
            timeout: Request timeout in seconds
        """
        super().__init__(model=model, temperature=temperature, max_tokens=max_tokens, timeout=timeout)
        if not api_key:
            raise ValueError("OpenAI API key is required for OpenAI LLM")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def chat(
        self,
        messages: List[Message],
        tools: Optional[List[ToolDefinition]] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        data = {
            "model": self.model,
            "messages": [m.to_dict() for m in messages],
            "temperature": temperature if temperature is not None else self.temperature,
            "max_tokens": max_tokens if max_tokens is not None else self.max_tokens,
        }
        if tools:
            data["tools"] = [
                {
                    "type": "function",
                    "function": {
                        "name": t.name,
                        "description": t.description,
                        "parameters": t.input_schema,
                    },
                }
                for t in tools
            ]
            data["tool_choice"] = "auto"

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self._base_url}/chat/completions", json=data, headers=headers
                )
                response.raise_for_status()
                result = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"OpenAI API error: {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.TimeoutException as e:
            raise ProviderError(f"OpenAI API timed out after {self.timeout}s") from e
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"OpenAI request failed: {e}") from e

        return self._parse(result)

    def _parse(self, result: dict) -> LLMResponse:
        """Normalize a chat completion body into an LLMResponse."""
        try:
            choice = result["choices"][0]
            message = choice["message"]
            tool_calls = [
                ToolCall(
                    id=call["id"],
                    name=call["function"]["name"],
                    input=json.loads(call["function"].get("arguments") or "{}"),
                )
                for call in message.get("tool_calls") or []
            ]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderError(f"Unexpected OpenAI API response format: {result}") from e

        usage = result.get("usage") or {}
        if tool_calls:
            logger.debug("Model requested tools: %s", [c.name for c in tool_calls])

        return LLMResponse(
            content=message.get("content") or "",
            model=result.get("model", self.model),
            tool_calls=tool_calls,
            tokens_used=usage.get("total_tokens"),
            finish_reason=choice.get("finish_reason"),
        )

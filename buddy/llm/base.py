"""Base LLM interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Message:
    """One conversation message.

    Attributes:
        role: "system", "user" or "assistant"
        content: Message text
    """

    role: str
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass
class ToolCall:
    """A tool invocation requested by the model."""

    id: str
    name: str
    input: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolDefinition:
    """Provider-neutral tool description: name, description and JSON schema."""

    name: str
    description: str
    input_schema: Dict[str, Any]


@dataclass
class LLMResponse:
    """Response from LLM generation.

    Attributes:
        content: Generated text content (may be empty when only tools are called)
        tool_calls: Tool invocations requested by the model
        model: Model name used for generation
        tokens_used: Number of tokens consumed (if available)
        finish_reason: Reason generation finished (e.g., "stop", "tool_use")
    """

    content: str
    model: str
    tool_calls: List[ToolCall] = field(default_factory=list)
    tokens_used: Optional[int] = None
    finish_reason: Optional[str] = None


class BaseLLM(ABC):
    """Abstract base class for chat model providers.

    All providers (OpenAI, Claude) must implement this interface.
    """

    def __init__(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        timeout: float = 30.0,
    ):
        """Initialize LLM.

        Args:
            model: Model name (e.g., "gpt-4o-mini")
            temperature: Sampling temperature (0.0 - 1.0)
            max_tokens: Maximum tokens to generate
            timeout: Request timeout in seconds
        """
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

    @abstractmethod
    async def chat(
        self,
        messages: List[Message],
        tools: Optional[List[ToolDefinition]] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Run one chat completion.

        Args:
            messages: Conversation so far
            tools: Tools the model may call (None or empty disables tool calling)
            temperature: Override default temperature
            max_tokens: Override default max_tokens

        Returns:
            LLMResponse with text and any requested tool calls

        Raises:
            ProviderError: On HTTP errors, timeouts or malformed responses
        """
        pass

"""Chat model providers."""

from buddy.llm.base import BaseLLM, LLMResponse, Message, ToolCall, ToolDefinition
from buddy.llm.claude import ClaudeLLM
from buddy.llm.factory import create_llm
from buddy.llm.openai_chat import OpenAIChatLLM

__all__ = [
    "BaseLLM",
    "ClaudeLLM",
    "LLMResponse",
    "Message",
    "OpenAIChatLLM",
    "ToolCall",
    "ToolDefinition",
    "create_llm",
]

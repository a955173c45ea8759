"""Single-round tool-calling orchestrator.

Flow:
    first model call (with tools) → direct answer
                                  → run tool calls → follow-up model call (no tools)
"""

import json
import logging
from dataclasses import dataclass
from typing import List, Optional

from buddy.agent.prompts import build_system_prompt
from buddy.config import AgentConfig
from buddy.errors import ToolExecutionError, UnknownTool
from buddy.llm.base import BaseLLM, Message, ToolCall
from buddy.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = "I apologize, but I encountered an issue processing your request."


@dataclass
class ToolResult:
    name: str
    result: str


def format_tool_calls(tool_calls: List[ToolCall]) -> str:
    """Assistant placeholder used when the model called tools without any text."""
    calls = "\n".join(f"Calling {c.name} with: {json.dumps(c.input)}" for c in tool_calls)
    return f"Processing your request by calling: {calls}"


def format_tool_results(results: List[ToolResult]) -> str:
    body = "\n\n".join(f"Tool: {r.name}\nResult: {r.result}" for r in results)
    return (
        "Here are the results from the tools that were called:\n\n"
        f"{body}\n\n"
        "Please use these results to provide a helpful response to the original question."
    )


class Orchestrator:
    """Turns one user message into one answer, calling tools at most once."""

    def __init__(
        self,
        llm: BaseLLM,
        registry: ToolRegistry,
        config: Optional[AgentConfig] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        """Initialize Orchestrator.

        Args:
            llm: Chat model used for both calls
            registry: Tools offered on the first call
            config: Agent settings (company names, escalation hint)
            temperature: Override the model's default temperature
            max_tokens: Override the model's default max_tokens
        """
        self._llm = llm
        self._registry = registry
        self._config = config or AgentConfig()
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def handle_message(self, user_id: str, text: str) -> str:
        """Answer one message. Never raises; failures become an apology text.

        Args:
            user_id: Opaque id of the asking user (used for logging only)
            text: The user's message

        Returns:
            Answer text
        """
        try:
            return await self._run(user_id, text)
        except Exception as e:
            logger.exception("Error handling message from %s", user_id)
            return (
                f"I encountered an issue processing your message: {e}. "
                f"Please try again or {self._config.escalation_hint} for assistance."
            )

    async def _run(self, user_id: str, text: str) -> str:
        definitions = self._registry.definitions()
        messages = [
            Message(role="system", content=build_system_prompt(self._config, definitions)),
            Message(role="user", content=text),
        ]

        first = await self._llm.chat(
            messages,
            tools=definitions,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )

        if not first.tool_calls:
            logger.info("Answered %s directly", user_id)
            return first.content or FALLBACK_ANSWER

        results = [await self._execute(call) for call in first.tool_calls]

        messages.append(
            Message(role="assistant", content=first.content or format_tool_calls(first.tool_calls))
        )
        messages.append(Message(role="user", content=format_tool_results(results)))

        final = await self._llm.chat(
            messages,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        logger.info("Answered %s after %d tool call(s)", user_id, len(results))
        return final.content or FALLBACK_ANSWER

    async def _execute(self, call: ToolCall) -> ToolResult:
        try:
            result = await self._registry.dispatch(call.name, call.input)
        except (UnknownTool, ToolExecutionError) as e:
            logger.warning("Tool call %s failed: %s", call.name, e)
            result = f"Error executing tool: {e}"
        return ToolResult(name=call.name, result=result)

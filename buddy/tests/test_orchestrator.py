"""Tests for the tool-calling orchestrator."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from buddy.agent.orchestrator import FALLBACK_ANSWER, Orchestrator, format_tool_calls
from buddy.agent.prompts import build_system_prompt
from buddy.config import AgentConfig
from buddy.errors import ProviderError
from buddy.llm.base import LLMResponse, ToolCall
from buddy.tools.base import Tool, ToolInput
from buddy.tools.registry import ToolRegistry


class QueryInput(ToolInput):
    query: str


class LookupTool(Tool):
    input_model = QueryInput

    def name(self):
        return "get_faq_answer"

    def description(self):
        return "Look up the FAQ"

    async def execute(self, params):
        return f"FAQ says: {params.query} is paid time off"


class FailingTool(Tool):
    input_model = QueryInput

    def name(self):
        return "search_knowledge_base"

    def description(self):
        return "Search the knowledge base"

    async def execute(self, params):
        raise RuntimeError("index offline")


def _llm(*responses):
    llm = Mock()
    llm.model = "test-model"
    llm.chat = AsyncMock(side_effect=list(responses))
    return llm


def _response(content="", tool_calls=None):
    return LLMResponse(content=content, model="test-model", tool_calls=tool_calls or [])


@pytest.fixture
def registry():
    return ToolRegistry([LookupTool(), FailingTool()])


class TestDirectAnswer:
    def test_returns_first_response(self, registry):
        llm = _llm(_response("Welcome aboard!"))
        agent = Orchestrator(llm, registry)

        assert asyncio.run(agent.handle_message("U1", "hi")) == "Welcome aboard!"
        assert llm.chat.await_count == 1

    def test_first_call_messages_and_tools(self, registry):
        llm = _llm(_response("ok"))
        config = AgentConfig()
        agent = Orchestrator(llm, registry, config, temperature=0.7, max_tokens=1024)

        asyncio.run(agent.handle_message("U1", "What is PTO?"))

        args, kwargs = llm.chat.call_args
        messages = args[0]
        assert [m.role for m in messages] == ["system", "user"]
        assert messages[0].content == build_system_prompt(config, registry.definitions())
        assert messages[1].content == "What is PTO?"
        assert [t.name for t in kwargs["tools"]] == ["get_faq_answer", "search_knowledge_base"]
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 1024

    def test_empty_answer_falls_back(self, registry):
        agent = Orchestrator(_llm(_response("")), registry)
        assert asyncio.run(agent.handle_message("U1", "hi")) == FALLBACK_ANSWER


class TestToolRound:
    def test_tool_results_fed_back(self, registry):
        llm = _llm(
            _response(tool_calls=[ToolCall(id="1", name="get_faq_answer", input={"query": "PTO"})]),
            _response("PTO is paid time off."),
        )
        agent = Orchestrator(llm, registry)

        answer = asyncio.run(agent.handle_message("U1", "What is PTO?"))

        assert answer == "PTO is paid time off."
        assert llm.chat.await_count == 2

        second_args, second_kwargs = llm.chat.call_args
        messages = second_args[0]
        assert [m.role for m in messages] == ["system", "user", "assistant", "user"]
        assert messages[2].content == 'Processing your request by calling: Calling get_faq_answer with: {"query": "PTO"}'
        assert messages[3].content == (
            "Here are the results from the tools that were called:\n\n"
            "Tool: get_faq_answer\nResult: FAQ says: PTO is paid time off\n\n"
            "Please use these results to provide a helpful response to the original question."
        )
        # Single round: no tools offered on the follow-up
        assert second_kwargs.get("tools") is None

    def test_model_text_used_as_placeholder(self, registry):
        llm = _llm(
            _response("Let me check.", [ToolCall(id="1", name="get_faq_answer", input={"query": "PTO"})]),
            _response("Done."),
        )
        asyncio.run(Orchestrator(llm, registry).handle_message("U1", "q"))

        messages = llm.chat.call_args.args[0]
        assert messages[2].content == "Let me check."

    def test_failing_tool_does_not_stop_siblings(self, registry):
        llm = _llm(
            _response(
                tool_calls=[
                    ToolCall(id="1", name="search_knowledge_base", input={"query": "PTO"}),
                    ToolCall(id="2", name="get_faq_answer", input={"query": "PTO"}),
                ]
            ),
            _response("PTO is paid time off."),
        )

        answer = asyncio.run(Orchestrator(llm, registry).handle_message("U1", "What is PTO?"))

        assert answer == "PTO is paid time off."
        results = llm.chat.call_args.args[0][3].content
        assert "Tool: search_knowledge_base\nResult: Error executing tool: index offline" in results
        assert "Tool: get_faq_answer\nResult: FAQ says: PTO is paid time off" in results

    def test_unknown_tool_reported(self, registry):
        llm = _llm(
            _response(tool_calls=[ToolCall(id="1", name="book_flight", input={})]),
            _response("Sorry, I can't do that."),
        )

        answer = asyncio.run(Orchestrator(llm, registry).handle_message("U1", "book me a flight"))

        assert answer == "Sorry, I can't do that."
        assert "Result: Error executing tool: Unknown tool: book_flight" in llm.chat.call_args.args[0][3].content

    def test_invalid_tool_input_reported(self, registry):
        llm = _llm(
            _response(tool_calls=[ToolCall(id="1", name="get_faq_answer", input={"q": "typo"})]),
            _response("ok"),
        )

        asyncio.run(Orchestrator(llm, registry).handle_message("U1", "q"))

        assert "Error executing tool: invalid input" in llm.chat.call_args.args[0][3].content

    def test_empty_followup_falls_back(self, registry):
        llm = _llm(
            _response(tool_calls=[ToolCall(id="1", name="get_faq_answer", input={"query": "x"})]),
            _response(""),
        )
        assert asyncio.run(Orchestrator(llm, registry).handle_message("U1", "q")) == FALLBACK_ANSWER


class TestErrorFallback:
    def test_provider_error_becomes_message(self, registry):
        llm = _llm(ProviderError("Claude API error: 529 - overloaded"))
        agent = Orchestrator(llm, registry, AgentConfig(escalation_hint="ping #help"))

        answer = asyncio.run(agent.handle_message("U1", "hi"))

        assert answer == (
            "I encountered an issue processing your message: Claude API error: 529 - overloaded. "
            "Please try again or ping #help for assistance."
        )

    def test_second_call_failure_becomes_message(self, registry):
        llm = _llm(
            _response(tool_calls=[ToolCall(id="1", name="get_faq_answer", input={"query": "x"})]),
            ProviderError("OpenAI API timed out after 30.0s"),
        )

        answer = asyncio.run(Orchestrator(llm, registry).handle_message("U1", "q"))

        assert answer.startswith("I encountered an issue processing your message: OpenAI API timed out")
        assert answer.endswith("reach out to your manager or in #ask-anything for assistance.")


def test_format_tool_calls_multiple():
    calls = [ToolCall(id="1", name="a", input={}), ToolCall(id="2", name="b", input={"x": 1})]
    assert format_tool_calls(calls) == (
        "Processing your request by calling: Calling a with: {}\nCalling b with: {\"x\": 1}"
    )


def test_system_prompt_lists_tools(registry):
    prompt = build_system_prompt(AgentConfig(company_name="Acme", product_name="Rocket"), registry.definitions())

    assert "Acme Onboarding Buddy" in prompt
    assert "Rocket" in prompt
    assert "- get_faq_answer: Look up the FAQ" in prompt

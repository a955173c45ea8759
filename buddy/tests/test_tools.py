"""Tests for agent tools and the tool registry."""

import asyncio

import pytest

from buddy.data.faqs import DEFAULT_FAQS
from buddy.errors import ToolExecutionError, UnknownTool
from buddy.faq.matcher import FAQMatcher
from buddy.tools.base import Tool, ToolInput
from buddy.tools.faq import FAQTool
from buddy.tools.knowledge import KnowledgeSearchTool
from buddy.tools.onboarding import CompanyOverviewTool, RoleChecklistTool
from buddy.tools.registry import ToolRegistry


class EchoInput(ToolInput):
    text: str


class EchoTool(Tool):
    input_model = EchoInput

    def name(self):
        return "echo"

    def description(self):
        return "Echo the text back"

    async def execute(self, params):
        return params.text


class BrokenTool(Tool):
    def name(self):
        return "broken"

    def description(self):
        return "Always fails"

    async def execute(self, params):
        raise RuntimeError("database unavailable")


class TestToolBase:
    def test_parameters_schema(self):
        schema = EchoTool().parameters_schema()

        assert schema["type"] == "object"
        assert schema["properties"] == {"text": {"type": "string"}}
        assert schema["required"] == ["text"]
        assert "title" not in schema

    def test_no_input_schema(self):
        schema = BrokenTool().parameters_schema()
        assert schema["properties"] == {}
        assert schema["required"] == []

    def test_to_definition(self):
        definition = EchoTool().to_definition()

        assert definition.name == "echo"
        assert definition.description == "Echo the text back"
        assert definition.input_schema["required"] == ["text"]


class TestToolRegistry:
    def test_register_and_lookup(self):
        registry = ToolRegistry([EchoTool(), BrokenTool()])

        assert registry.names() == ["echo", "broken"]
        assert [d.name for d in registry.definitions()] == ["echo", "broken"]
        assert "echo" in registry
        assert len(registry) == 2

    def test_duplicate_name_rejected(self):
        registry = ToolRegistry([EchoTool()])
        with pytest.raises(ValueError, match="already registered"):
            registry.register(EchoTool())

    def test_dispatch(self):
        registry = ToolRegistry([EchoTool()])
        assert asyncio.run(registry.dispatch("echo", {"text": "hi"})) == "hi"

    def test_dispatch_coerces_numbers_to_str(self):
        registry = ToolRegistry([EchoTool()])
        assert asyncio.run(registry.dispatch("echo", {"text": 42})) == "42"

    def test_unknown_tool(self):
        registry = ToolRegistry([EchoTool()])

        with pytest.raises(UnknownTool, match="Unknown tool: nope") as exc_info:
            asyncio.run(registry.dispatch("nope", {}))
        assert exc_info.value.name == "nope"

    def test_invalid_input(self):
        registry = ToolRegistry([EchoTool()])

        with pytest.raises(ToolExecutionError, match="invalid input"):
            asyncio.run(registry.dispatch("echo", {"text": "hi", "extra": 1}))
        with pytest.raises(ToolExecutionError):
            asyncio.run(registry.dispatch("echo", {}))

    def test_tool_exception_wrapped(self):
        registry = ToolRegistry([BrokenTool()])

        with pytest.raises(ToolExecutionError, match="database unavailable") as exc_info:
            asyncio.run(registry.dispatch("broken", None))
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.name == "broken"


class TestKnowledgeSearchTool:
    def test_formats_results(self, index, make_chunk):
        index.add_chunks(
            [
                make_chunk("day1-chunk-0", source="day1", title="Day 1", content="Attend the 9 AM standup."),
                make_chunk("misc-chunk-0", source="misc", embedding=(0.0, 1.0, 0.0)),
            ]
        )
        tool = KnowledgeSearchTool(index, top_k=5, min_similarity=0.5)

        result = asyncio.run(tool.execute(tool.input_model(query="first day")))

        assert result.startswith("Found 1 relevant excerpt(s) in the knowledge base:")
        assert "[1] Day 1 (source: day1, similarity: 1.000)" in result
        assert "Attend the 9 AM standup." in result
        assert "misc" not in result

    def test_top_k_override(self, index, make_chunk):
        index.add_chunks([make_chunk(f"c{i}", source=f"s{i}") for i in range(4)])
        registry = ToolRegistry([KnowledgeSearchTool(index, top_k=5)])

        result = asyncio.run(registry.dispatch("search_knowledge_base", {"query": "q", "top_k": 2}))

        assert result.startswith("Found 2 relevant")

    def test_nothing_found(self, index):
        tool = KnowledgeSearchTool(index)
        result = asyncio.run(tool.execute(tool.input_model(query="sprint zero")))
        assert result == 'No relevant information found in the knowledge base for "sprint zero".'

    def test_schema(self, index):
        schema = KnowledgeSearchTool(index).parameters_schema()
        assert schema["required"] == ["query"]
        assert "top_k" in schema["properties"]


class TestStaticTools:
    def test_faq_tool(self):
        registry = ToolRegistry([FAQTool(FAQMatcher(DEFAULT_FAQS))])
        result = asyncio.run(registry.dispatch("get_faq_answer", {"query": "what is pto"}))
        assert result.startswith("To request time off:")

    def test_company_overview(self):
        registry = ToolRegistry([CompanyOverviewTool("Risidio", "Lunim")])

        result = asyncio.run(registry.dispatch("get_company_overview", {}))

        assert result.startswith("*About Risidio*")
        assert "*About Lunim*" in result
        assert "Innovation First" in result

    def test_role_checklist(self):
        registry = ToolRegistry([RoleChecklistTool()])

        result = asyncio.run(registry.dispatch("get_role_checklist", {"role": "Developer"}))

        assert result.startswith("*Welcome to Risidio as a Developer!*")
        assert "Set up your local development environment" in result
        assert result.endswith("_Questions? Ask in #ask-anything or reach out to your manager!_")

    def test_unknown_role_falls_back_to_other(self):
        registry = ToolRegistry([RoleChecklistTool()])

        result = asyncio.run(registry.dispatch("get_role_checklist", {"role": "astronaut"}))

        assert result.startswith("*Welcome to Risidio as a Other!*")

    def test_role_schema_enum(self):
        schema = RoleChecklistTool().parameters_schema()
        assert schema["properties"]["role"]["enum"] == [
            "developer",
            "product",
            "design",
            "marketing",
            "data",
            "operations",
            "other",
        ]

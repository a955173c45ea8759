"""FAQ lookup tool."""

from pydantic import Field

from buddy.faq.matcher import FAQMatcher
from buddy.tools.base import Tool, ToolInput


class FAQInput(ToolInput):
    query: str = Field(
        description='The question or topic to look up (e.g., "What is PTO?", "Which channels should I join?")'
    )


class FAQTool(Tool):
    input_model = FAQInput

    def __init__(self, matcher: FAQMatcher):
        self._matcher = matcher

    def name(self) -> str:
        return "get_faq_answer"

    def description(self) -> str:
        return (
            "Look up the curated FAQ for policies, processes, tools, Slack channels, benefits "
            "and first-week guidance. Use this for specific questions such as PTO, expenses "
            "or tool access."
        )

    async def execute(self, params: FAQInput) -> str:
        return self._matcher.answer(params.query)

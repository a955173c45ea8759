"""Agent tools and the tool registry."""

from buddy.tools.base import NoInput, Tool, ToolInput
from buddy.tools.faq import FAQTool
from buddy.tools.knowledge import KnowledgeSearchTool
from buddy.tools.onboarding import CompanyOverviewTool, RoleChecklistTool
from buddy.tools.registry import ToolRegistry

__all__ = [
    "CompanyOverviewTool",
    "FAQTool",
    "KnowledgeSearchTool",
    "NoInput",
    "RoleChecklistTool",
    "Tool",
    "ToolInput",
    "ToolRegistry",
]

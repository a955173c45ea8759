"""Static onboarding content tools: company overview and role checklists."""

from typing import Any, Literal

from pydantic import Field, field_validator

from buddy.data.checklists import ROLES, format_checklist
from buddy.data.company import format_company_overview
from buddy.tools.base import Tool, ToolInput

Role = Literal["developer", "product", "design", "marketing", "data", "operations", "other"]


class CompanyOverviewTool(Tool):
    def __init__(self, company_name: str = "Risidio", product_name: str = "Lunim"):
        self._company_name = company_name
        self._product_name = product_name

    def name(self) -> str:
        return "get_company_overview"

    def description(self) -> str:
        return (
            f"Get {self._company_name}'s mission, core values, culture, ways of working and an "
            f"overview of {self._product_name}. Use this for questions about the company or product."
        )

    async def execute(self, params) -> str:
        return format_company_overview(self._company_name, self._product_name)


class RoleChecklistInput(ToolInput):
    role: Role = Field(description="The employee's role or department")

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return value if value in ROLES else "other"
        return value


class RoleChecklistTool(Tool):
    input_model = RoleChecklistInput

    def __init__(self, company_name: str = "Risidio"):
        self._company_name = company_name

    def name(self) -> str:
        return "get_role_checklist"

    def description(self) -> str:
        return (
            "Get the role-specific onboarding checklist for a new employee, grouped by "
            "culture, people, tools and work. Use this when the user asks what to focus on "
            "for their role."
        )

    async def execute(self, params: RoleChecklistInput) -> str:
        return format_checklist(params.role, self._company_name)

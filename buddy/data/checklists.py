"""Role-based onboarding checklists."""

from dataclasses import dataclass
from typing import Dict, List, Optional

ROLES = ("developer", "product", "design", "marketing", "data", "operations", "other")

CATEGORIES = ("culture", "people", "tools", "work")


@dataclass(frozen=True, slots=True)
class ChecklistItem:
    id: str
    title: str
    category: str
    description: Optional[str] = None


_COMMON = [
    ChecklistItem(
        "read_onboarding_hub",
        "Read the onboarding hub",
        "culture",
        "Skim the hub to understand the mission, current focus areas, and how teams are structured.",
    ),
    ChecklistItem(
        "join_core_channels",
        "Join core Slack channels",
        "people",
        "At minimum join #onboarding-december, #weekly-update, #ask-anything and your team channel.",
    ),
    ChecklistItem(
        "meet_buddy",
        "Meet your manager and onboarding buddy",
        "people",
        "Your buddy is the go-to for day-to-day questions about processes and culture.",
    ),
]

_FIRST_CONTRIBUTION = ChecklistItem(
    "first_contribution",
    "Ship a first small contribution",
    "work",
    "Pick something small with your buddy or manager and get it done in your first week.",
)


def _tools(description: str) -> ChecklistItem:
    return ChecklistItem("access_core_tools", "Confirm access to core tools", "tools", description)


CHECKLISTS: Dict[str, List[ChecklistItem]] = {
    "developer": _COMMON
    + [
        _tools("Make sure you can reach Slack, Notion, GitHub and the issue tracker."),
        ChecklistItem(
            "dev_env_setup",
            "Set up your local development environment",
            "tools",
            "Clone the main repository, install dependencies and run the app locally.",
        ),
        _FIRST_CONTRIBUTION,
    ],
    "product": _COMMON
    + [
        _tools("Make sure you can reach Slack, Notion and the roadmap board."),
        ChecklistItem(
            "review_roadmap",
            "Review the product roadmap",
            "work",
            "Read the current roadmap and join #lunim-product.",
        ),
        _FIRST_CONTRIBUTION,
    ],
    "design": _COMMON
    + [
        _tools("Make sure you can reach Slack, Notion and the design files."),
        ChecklistItem(
            "design_system",
            "Explore the design system",
            "tools",
            "Get familiar with the components and guidelines the team uses.",
        ),
        _FIRST_CONTRIBUTION,
    ],
    "marketing": _COMMON
    + [
        _tools("Make sure you can reach Slack, Notion and the marketing tools."),
        ChecklistItem(
            "brand_guidelines",
            "Read the brand guidelines",
            "culture",
            "Learn the voice, tone and visual identity used across channels.",
        ),
        _FIRST_CONTRIBUTION,
    ],
    "data": _COMMON
    + [
        _tools("Make sure you can reach Slack, Notion and the analytics stack."),
        ChecklistItem(
            "data_sources",
            "Walk through the main data sources",
            "work",
            "Ask your buddy for a tour of the dashboards and where the data comes from.",
        ),
        _FIRST_CONTRIBUTION,
    ],
    "operations": _COMMON
    + [
        _tools("Make sure you can reach Slack, Notion and the HR management tools."),
        ChecklistItem(
            "review_processes",
            "Review key processes and policies",
            "tools",
            "Familiarize yourself with onboarding procedures and documentation standards.",
        ),
    ],
    "other": _COMMON
    + [
        _tools("Make sure you can reach Slack and Notion."),
        _FIRST_CONTRIBUTION,
    ],
}


def get_role_checklist(role: str) -> List[ChecklistItem]:
    """Checklist for ``role``; unknown roles get the ``other`` checklist."""
    return CHECKLISTS.get(role.lower(), CHECKLISTS["other"])


def format_checklist(role: str, company_name: str = "Risidio") -> str:
    """Checklist grouped by category, ready to send as a chat message."""
    role = role.lower() if role.lower() in CHECKLISTS else "other"
    items = CHECKLISTS[role]

    lines = [f"*Welcome to {company_name} as a {role.capitalize()}!*", "", "Here's your onboarding checklist:", ""]
    for category in CATEGORIES:
        in_category = [item for item in items if item.category == category]
        if not in_category:
            continue
        lines.append(f"*{category.capitalize()}*")
        for i, item in enumerate(in_category, start=1):
            lines.append(f"{i}. {item.title}")
            if item.description:
                lines.append(f"   {item.description}")
        lines.append("")

    lines.append("_Questions? Ask in #ask-anything or reach out to your manager!_")
    return "\n".join(lines)

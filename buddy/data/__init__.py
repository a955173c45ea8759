"""Static onboarding content: FAQ table, company overview, role checklists."""

from buddy.data.checklists import ROLES, format_checklist, get_role_checklist
from buddy.data.company import format_company_overview
from buddy.data.faqs import DEFAULT_FAQS

__all__ = [
    "DEFAULT_FAQS",
    "ROLES",
    "format_checklist",
    "format_company_overview",
    "get_role_checklist",
]

"""Conversation orchestration."""

from buddy.agent.orchestrator import FALLBACK_ANSWER, Orchestrator
from buddy.agent.prompts import build_system_prompt

__all__ = ["FALLBACK_ANSWER", "Orchestrator", "build_system_prompt"]

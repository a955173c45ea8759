"""FastAPI dependencies reading the components built at startup."""

from fastapi import HTTPException, Request

from buddy.agent.orchestrator import Orchestrator
from buddy.config import AppConfig
from buddy.storage.vectorstore import KnowledgeIndex


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_index(request: Request) -> KnowledgeIndex:
    index = getattr(request.app.state, "index", None)
    if index is None:
        raise HTTPException(status_code=503, detail="Knowledge index is not available")
    return index


def get_agent(request: Request) -> Orchestrator:
    """Get the orchestrator, or 503 when it could not be built (e.g. no LLM key)."""
    agent = getattr(request.app.state, "agent", None)
    if agent is None:
        errors = getattr(request.app.state, "startup_errors", [])
        detail = "Agent is not available"
        if errors:
            detail = f"{detail}: {'; '.join(errors)}"
        raise HTTPException(status_code=503, detail=detail)
    return agent

"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buddy import __version__
from buddy.agent.orchestrator import Orchestrator
from buddy.api.routes import ask, search
from buddy.config import AppConfig, load_config
from buddy.container import build_agent, build_index
from buddy.storage.vectorstore import KnowledgeIndex

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build whatever was not injected into create_app.

    Startup does not fail on a missing LLM key; the error is recorded and
    /health reports degraded while /search and /stats keep working.
    """
    logger.info("Initializing Onboarding Buddy API...")
    state = app.state
    state.startup_errors = []

    if state.index is None:
        state.index = build_index(state.config)
    state.index.load()

    if state.agent is None:
        try:
            state.agent = build_agent(state.config, index=state.index)
        except ValueError as e:
            logger.error("Agent unavailable: %s", e)
            state.startup_errors.append(str(e))

    logger.info("Onboarding Buddy API started")

    yield

    logger.info("Onboarding Buddy API shutdown complete")


def create_app(
    config: Optional[AppConfig] = None,
    index: Optional[KnowledgeIndex] = None,
    agent: Optional[Orchestrator] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Application config (loaded with ``load_config()`` if omitted)
        index: Prebuilt knowledge index
        agent: Prebuilt orchestrator

    Returns:
        Configured FastAPI application
    """
    config = config or load_config()

    app = FastAPI(
        title="Onboarding Buddy API",
        description="Onboarding assistant with FAQ and knowledge base tools",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.index = index
    app.state.agent = agent
    app.state.startup_errors = []

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.api.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(ask.router)
    app.include_router(search.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "Onboarding Buddy API",
            "version": __version__,
            "endpoints": ["/ask", "/search", "/stats", "/health"],
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        errors = getattr(app.state, "startup_errors", [])
        if errors:
            return {"status": "degraded", "startup_errors": errors}
        return {"status": "healthy"}

    return app

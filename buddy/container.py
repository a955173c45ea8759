"""Composition root: builds the clients, index, tools and agent from config."""

import logging
from typing import Optional

from buddy.agent.orchestrator import Orchestrator
from buddy.config import AppConfig, resolve_path
from buddy.data.faqs import DEFAULT_FAQS
from buddy.faq.matcher import FAQMatcher
from buddy.llm.base import BaseLLM
from buddy.llm.factory import create_llm
from buddy.pipeline.ingest import DocumentIngestor
from buddy.storage.embeddings import EmbeddingClient
from buddy.storage.vectorstore import KnowledgeIndex
from buddy.tools.faq import FAQTool
from buddy.tools.knowledge import KnowledgeSearchTool
from buddy.tools.onboarding import CompanyOverviewTool, RoleChecklistTool
from buddy.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def build_embeddings(config: AppConfig) -> EmbeddingClient:
    """Raises ValueError when no embedding API key is configured."""
    return EmbeddingClient(
        api_key=config.embedding.api_key or "",
        model=config.embedding.model,
        base_url=config.embedding.base_url,
        batch_size=config.embedding.batch_size,
        timeout=config.embedding.timeout,
    )


def build_index(config: AppConfig, embeddings: Optional[EmbeddingClient] = None) -> KnowledgeIndex:
    """Knowledge index at ``storage.index_path`` (relative paths resolve against the cwd).

    When no client is passed one is built if an API key is configured;
    otherwise the index is usable for stats and deletion but not for search.
    """
    if embeddings is None and config.embedding.api_key:
        embeddings = build_embeddings(config)
    if embeddings is None:
        logger.warning("No embedding API key configured, knowledge search is disabled")
    return KnowledgeIndex(resolve_path(config.storage.index_path), embeddings)


def build_ingestor(
    config: AppConfig,
    index: Optional[KnowledgeIndex] = None,
    embeddings: Optional[EmbeddingClient] = None,
) -> DocumentIngestor:
    embeddings = embeddings or build_embeddings(config)
    index = index or build_index(config, embeddings)
    return DocumentIngestor(index, embeddings, config.chunking)


def build_faq_matcher(config: AppConfig) -> FAQMatcher:
    return FAQMatcher(DEFAULT_FAQS, escalation=config.agent.escalation_hint)


def build_registry(config: AppConfig, index: KnowledgeIndex) -> ToolRegistry:
    """Register every shipped tool, knowledge search first."""
    return ToolRegistry(
        [
            KnowledgeSearchTool(
                index,
                top_k=config.retrieval.top_k,
                min_similarity=config.retrieval.min_similarity,
            ),
            FAQTool(build_faq_matcher(config)),
            CompanyOverviewTool(config.agent.company_name, config.agent.product_name),
            RoleChecklistTool(config.agent.company_name),
        ]
    )


def build_agent(
    config: AppConfig,
    index: Optional[KnowledgeIndex] = None,
    llm: Optional[BaseLLM] = None,
) -> Orchestrator:
    """Wire an Orchestrator.

    Raises:
        ValueError: If no LLM API key is configured and no ``llm`` is passed
    """
    index = index or build_index(config)
    llm = llm or create_llm(config.llm)
    logger.info("Agent using model %s", llm.model)
    return Orchestrator(
        llm,
        build_registry(config, index),
        config.agent,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )

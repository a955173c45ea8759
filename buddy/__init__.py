"""Onboarding assistant: FAQ matching, semantic knowledge search and LLM tool calling."""

__version__ = "0.1.0"

# Domain entities
from buddy.domain.chunk import Chunk, IndexStats, SearchResult

# Storage adapters
from buddy.storage.embeddings import EmbeddingClient, cosine_similarity
from buddy.storage.vectorstore import KnowledgeIndex

# Pipeline components
from buddy.config import AppConfig, load_config
from buddy.pipeline.chunk import chunk_text
from buddy.pipeline.ingest import DocumentIngestor, IngestReport

# FAQ
from buddy.faq.matcher import FAQEntry, FAQMatcher

__all__ = [
    # Domain
    "Chunk",
    "IndexStats",
    "SearchResult",
    # Storage
    "EmbeddingClient",
    "KnowledgeIndex",
    "cosine_similarity",
    # Pipeline
    "AppConfig",
    "DocumentIngestor",
    "IngestReport",
    "chunk_text",
    "load_config",
    # FAQ
    "FAQEntry",
    "FAQMatcher",
]

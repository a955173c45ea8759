"""Storage adapters: embedding client and the file-backed knowledge index."""

from buddy.storage.embeddings import EmbeddingClient, cosine_similarity
from buddy.storage.vectorstore import KnowledgeIndex

__all__ = ["EmbeddingClient", "KnowledgeIndex", "cosine_similarity"]

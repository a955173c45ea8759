"""Domain entities for the knowledge index.

Plain data structures shared by storage, ingestion, tools and the API.
"""

from buddy.domain.chunk import Chunk, IndexStats, SearchResult

__all__ = ["Chunk", "IndexStats", "SearchResult"]

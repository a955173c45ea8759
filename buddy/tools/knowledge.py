"""Knowledge index search tool."""

import asyncio
from typing import Optional

from pydantic import Field

from buddy.storage.vectorstore import KnowledgeIndex
from buddy.tools.base import Tool, ToolInput


class KnowledgeSearchInput(ToolInput):
    query: str = Field(description="The question or topic to search for")
    top_k: Optional[int] = Field(
        default=None, ge=1, le=20, description="Number of excerpts to return"
    )


class KnowledgeSearchTool(Tool):
    """Semantic search over ingested onboarding documents."""

    input_model = KnowledgeSearchInput

    def __init__(self, index: KnowledgeIndex, top_k: int = 5, min_similarity: float = 0.5):
        self._index = index
        self._top_k = top_k
        self._min_similarity = min_similarity

    def name(self) -> str:
        return "search_knowledge_base"

    def description(self) -> str:
        return (
            "Search the onboarding knowledge base (ingested docs and team notes) for detailed, "
            "company-specific information not covered by the FAQ: workflows, first-day "
            "activities, programs, engineering practices. Returns the most relevant excerpts."
        )

    async def execute(self, params: KnowledgeSearchInput) -> str:
        top_k = params.top_k or self._top_k
        # Index search embeds the query over blocking HTTP
        results = await asyncio.to_thread(
            self._index.search,
            params.query,
            top_k=top_k,
            min_similarity=self._min_similarity,
        )

        if not results:
            return f'No relevant information found in the knowledge base for "{params.query}".'

        lines = [f"Found {len(results)} relevant excerpt(s) in the knowledge base:", ""]
        for i, result in enumerate(results, 1):
            metadata = result.chunk.metadata
            title = metadata.get("title") or result.chunk.source
            lines.append(
                f"[{i}] {title} (source: {result.chunk.source}, similarity: {result.similarity:.3f})"
            )
            lines.append(result.chunk.content)
            lines.append("")
        return "\n".join(lines).rstrip()

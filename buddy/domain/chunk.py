"""Chunk entity for the knowledge index."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class Chunk:
    """A span of source text with its embedding and provenance.

    Attributes:
        id: Upsert key, ``"<source>-chunk-<n>"`` for ingested documents
        content: Chunk text (stripped, non-empty)
        embedding: Embedding vector; same length for every chunk in an index
        metadata: ``source`` is required; ``category``, ``title``,
            ``chunkIndex``, ``totalChunks`` and ``timestamp`` are set by
            ingestion, and any extra keys are kept as-is
    """

    id: str
    content: str
    embedding: list[float]
    metadata: dict = field(default_factory=dict)

    @property
    def source(self) -> str:
        return self.metadata.get("source", "")

    def to_dict(self) -> dict:
        """Convert chunk to the persisted JSON shape."""
        return {
            "id": self.id,
            "content": self.content,
            "embedding": list(self.embedding),
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Chunk":
        """Create a chunk from its persisted JSON shape.

        Raises:
            KeyError: If a required field is missing
        """
        metadata = data["metadata"]
        if "source" not in metadata:
            raise KeyError("source")
        return cls(
            id=data["id"],
            content=data["content"],
            embedding=[float(x) for x in data["embedding"]],
            metadata=dict(metadata),
        )


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A chunk paired with its similarity to the query."""

    chunk: Chunk
    similarity: float

    def to_dict(self) -> dict:
        return {
            "id": self.chunk.id,
            "content": self.chunk.content,
            "metadata": dict(self.chunk.metadata),
            "similarity": self.similarity,
        }


@dataclass(frozen=True, slots=True)
class IndexStats:
    """Summary of the knowledge index contents."""

    total_chunks: int
    sources: list[str]
    avg_chunk_length: int

    def to_dict(self) -> dict:
        return {
            "total_chunks": self.total_chunks,
            "sources": list(self.sources),
            "avg_chunk_length": self.avg_chunk_length,
        }

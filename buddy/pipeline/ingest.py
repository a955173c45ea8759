"""Document ingestion into the knowledge index."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

import yaml

from buddy.config import ChunkingConfig
from buddy.domain.chunk import Chunk
from buddy.pipeline.chunk import chunk_text
from buddy.storage.embeddings import EmbeddingClient
from buddy.storage.vectorstore import KnowledgeIndex

logger = logging.getLogger(__name__)


@dataclass
class IngestReport:
    """Outcome of ingesting a document collection."""

    total: int = 0
    ingested: int = 0
    skipped: int = 0
    chunks: int = 0
    errors: list[dict] = field(default_factory=list)


class DocumentIngestor:
    """Chunks documents, embeds them and writes them to the knowledge index."""

    def __init__(
        self,
        index: KnowledgeIndex,
        embeddings: EmbeddingClient,
        config: ChunkingConfig | None = None,
    ):
        self._index = index
        self._embeddings = embeddings
        self._config = config or ChunkingConfig()

    def ingest_document(
        self,
        content: str,
        metadata: dict[str, Any],
        chunk_size: int | None = None,
        overlap: int | None = None,
    ) -> int:
        """Ingest one document, replacing any earlier version of its source.

        All chunks are embedded in a single batch; if that fails nothing is
        written to the index.

        Args:
            content: Document text
            metadata: Must contain ``source``; other keys are copied onto every chunk
            chunk_size: Override the configured chunk size
            overlap: Override the configured overlap

        Returns:
            Number of chunks written

        Raises:
            ValueError: If ``source`` is missing or chunking parameters are invalid
            ProviderError: If the embedding call fails
        """
        source = metadata.get("source")
        if not source:
            raise ValueError("metadata.source is required")

        size = chunk_size if chunk_size is not None else self._config.chunk_size
        step_overlap = overlap if overlap is not None else self._config.overlap

        pieces = [p for p in chunk_text(content, size, step_overlap) if p]
        if not pieces:
            # Existing chunks of the source are kept
            logger.warning("Document %s has no text content, nothing ingested", source)
            return 0
        logger.info("Processing document %s: %d chunks", source, len(pieces))

        embeddings = self._embeddings.embed_batch(pieces)

        timestamp = datetime.now(timezone.utc).isoformat()
        chunks = [
            Chunk(
                id=f"{source}-chunk-{i}",
                content=piece,
                embedding=embedding,
                metadata={
                    **metadata,
                    "chunkIndex": i,
                    "totalChunks": len(pieces),
                    "timestamp": timestamp,
                },
            )
            for i, (piece, embedding) in enumerate(zip(pieces, embeddings))
        ]

        self._index.replace_source(source, chunks)
        self._index.save()

        logger.info("Ingested %d chunks from %s", len(chunks), source)
        return len(chunks)

    def ingest_documents(self, documents: Iterable[dict]) -> IngestReport:
        """Ingest a collection of ``{content, source, category?, title?, metadata?}``.

        Invalid entries are skipped and failing documents are recorded in the
        report; neither stops the remaining documents.
        """
        report = IngestReport()
        for doc in documents:
            report.total += 1
            if not isinstance(doc, dict) or not doc.get("content") or not doc.get("source"):
                logger.warning("Skipping invalid document: %.200s", json.dumps(doc, default=str))
                report.skipped += 1
                continue

            metadata = {
                "source": doc["source"],
                "category": doc.get("category") or "general",
            }
            if doc.get("title"):
                metadata["title"] = doc["title"]
            metadata.update(doc.get("metadata") or {})
            metadata["source"] = doc["source"]

            try:
                report.chunks += self.ingest_document(doc["content"], metadata)
                report.ingested += 1
            except Exception as e:
                logger.error("Error ingesting %s: %s", doc["source"], e)
                report.errors.append({"source": doc["source"], "error": str(e)})

        logger.info(
            "Ingestion complete: %d/%d documents, %d chunks",
            report.ingested,
            report.total,
            report.chunks,
        )
        return report

    def ingest_file(self, path: str | Path) -> IngestReport:
        """Ingest a knowledge-base file shaped ``{"documents": [...]}``.

        JSON is expected; ``.yaml``/``.yml`` files are read with PyYAML.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not hold a ``documents`` list
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Knowledge base file not found: {path}")

        raw = path.read_text(encoding="utf-8")
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(raw) or {}
        else:
            data = json.loads(raw)

        documents = data.get("documents", []) if isinstance(data, dict) else None
        if not isinstance(documents, list):
            raise ValueError('Invalid knowledge base format. Expected { "documents": [...] }')

        logger.info("Starting ingestion of %d documents from %s", len(documents), path)
        return self.ingest_documents(documents)

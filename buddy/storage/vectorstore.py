"""File-backed knowledge index with linear-scan semantic search."""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Iterable, List, Optional

import numpy as np

from buddy.domain.chunk import Chunk, IndexStats, SearchResult
from buddy.errors import DimensionMismatch, IndexCorrupt, ProviderError
from buddy.storage.embeddings import EmbeddingClient, cosine_similarities

logger = logging.getLogger(__name__)


class KnowledgeIndex:
    """Knowledge index persisted as a single JSON document.

    The whole chunk list is loaded lazily on first access and rewritten on
    every save. A single re-entrant lock guards the in-memory list, so
    ingestion and search may run from different threads.
    """

    def __init__(self, store_path: str | Path, embeddings: Optional[EmbeddingClient] = None):
        """Initialize KnowledgeIndex.

        Args:
            store_path: Path of the JSON file backing the index
            embeddings: Client used to embed search queries (search is unavailable without one)
        """
        self._store_path = Path(store_path)
        self._embeddings = embeddings
        self._chunks: List[Chunk] = []
        self._loaded = False
        self._lock = threading.RLock()

    @property
    def store_path(self) -> Path:
        return self._store_path

    def load(self) -> None:
        """Load the index from disk once per instance.

        A missing file gives an empty index. An unreadable or corrupt file is
        logged and also gives an empty index so the service can start cold.
        """
        with self._lock:
            if self._loaded:
                return

            if not self._store_path.exists():
                logger.info("No existing knowledge index at %s, starting fresh", self._store_path)
                self._chunks = []
            else:
                try:
                    self._chunks = self._read()
                    logger.info(
                        "Loaded %d chunks from knowledge index %s",
                        len(self._chunks),
                        self._store_path,
                    )
                except IndexCorrupt as e:
                    logger.error("Knowledge index unreadable, starting empty: %s", e)
                    self._chunks = []

            self._loaded = True

    def _read(self) -> List[Chunk]:
        try:
            raw = json.loads(self._store_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise IndexCorrupt(f"{self._store_path}: {e}") from e

        if not isinstance(raw, list):
            raise IndexCorrupt(f"{self._store_path}: expected a JSON array of chunks")

        try:
            chunks = [Chunk.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise IndexCorrupt(f"{self._store_path}: malformed chunk ({e})") from e

        dims = {len(c.embedding) for c in chunks}
        if len(dims) > 1:
            raise IndexCorrupt(f"{self._store_path}: mixed embedding dimensions {sorted(dims)}")
        return chunks

    def save(self) -> None:
        """Rewrite the whole index file atomically."""
        with self._lock:
            self._store_path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps([c.to_dict() for c in self._chunks], indent=2)

            fd, tmp_path = tempfile.mkstemp(
                dir=self._store_path.parent,
                prefix=f".{self._store_path.name}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_path, self._store_path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise

            logger.info("Saved %d chunks to knowledge index %s", len(self._chunks), self._store_path)

    def add_chunks(self, chunks: Iterable[Chunk]) -> None:
        """Upsert chunks by id (existing chunks with the same id are replaced).

        Does not save; call ``save()`` afterwards.

        Raises:
            DimensionMismatch: If a chunk's embedding length differs from the index
        """
        chunks = list(chunks)
        with self._lock:
            self.load()
            self._check_dimensions(chunks)
            for chunk in chunks:
                self._chunks = [c for c in self._chunks if c.id != chunk.id]
                self._chunks.append(chunk)

    def replace_source(self, source: str, chunks: Iterable[Chunk]) -> None:
        """Drop every chunk of ``source`` and upsert ``chunks`` in one step.

        Does not save; call ``save()`` afterwards. The new chunks must match
        the dimension of the index as it stands, even when ``source`` holds
        every current chunk; changing embedding models needs ``clear()`` first.

        Raises:
            DimensionMismatch: If a chunk's embedding length differs from the index
        """
        chunks = list(chunks)
        with self._lock:
            self.load()
            self._check_dimensions(chunks)
            self._chunks = [c for c in self._chunks if c.source != source]
            self.add_chunks(chunks)

    def _check_dimensions(self, chunks: List[Chunk]) -> None:
        reference = self._chunks[0] if self._chunks else (chunks[0] if chunks else None)
        if reference is None:
            return
        expected = len(reference.embedding)
        for chunk in chunks:
            if len(chunk.embedding) != expected:
                raise DimensionMismatch(
                    f"Chunk {chunk.id} has {len(chunk.embedding)} dimensions, index has {expected}"
                )

    def search(
        self,
        query: str,
        top_k: int = 5,
        min_similarity: float = 0.5,
    ) -> List[SearchResult]:
        """Semantic search over every stored chunk.

        Results below ``min_similarity`` are dropped; the rest are sorted by
        similarity (descending, ties in ingestion order) and cut to ``top_k``.

        Args:
            query: Search query text
            top_k: Maximum number of results
            min_similarity: Minimum cosine similarity to keep a result

        Returns:
            Search results, best first

        Raises:
            ProviderError: If the query embedding fails
        """
        self.load()
        if top_k <= 0:
            return []

        with self._lock:
            if not self._chunks:
                logger.warning("Knowledge index is empty, nothing to search")
                return []

        if self._embeddings is None:
            raise ProviderError("No embedding client configured; set OPENAI_API_KEY to enable search")
        query_embedding = self._embeddings.embed(query)

        with self._lock:
            chunks = list(self._chunks)
        if not chunks:
            return []

        matrix = np.asarray([c.embedding for c in chunks], dtype=float)
        scores = cosine_similarities(query_embedding, matrix)

        # Stable sort keeps ingestion order among equal scores
        order = np.argsort(-scores, kind="stable")
        results = [
            SearchResult(chunk=chunks[i], similarity=float(scores[i]))
            for i in order
            if scores[i] >= min_similarity
        ]
        return results[:top_k]

    def get_chunks_by_source(self, source: str) -> List[Chunk]:
        """Get all chunks from a specific source."""
        with self._lock:
            self.load()
            return [c for c in self._chunks if c.source == source]

    def delete_by_source(self, source: str) -> int:
        """Delete all chunks of a source and persist.

        Returns:
            Number of chunks removed
        """
        with self._lock:
            self.load()
            before = len(self._chunks)
            self._chunks = [c for c in self._chunks if c.source != source]
            removed = before - len(self._chunks)
            self.save()
        logger.info("Deleted %d chunks from source %s", removed, source)
        return removed

    def clear(self) -> None:
        """Remove every chunk and persist the empty index."""
        with self._lock:
            self._chunks = []
            self._loaded = True
            self.save()
        logger.info("Cleared knowledge index")

    def get_stats(self) -> IndexStats:
        """Chunk count, distinct sources and mean chunk length."""
        with self._lock:
            self.load()
            sources = sorted({c.source for c in self._chunks})
            total = len(self._chunks)
            avg = round(sum(len(c.content) for c in self._chunks) / total) if total else 0
        return IndexStats(total_chunks=total, sources=sources, avg_chunk_length=avg)

    def __len__(self) -> int:
        with self._lock:
            self.load()
            return len(self._chunks)

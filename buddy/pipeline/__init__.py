"""Ingestion pipeline components."""

from buddy.pipeline.chunk import chunk_text
from buddy.pipeline.ingest import DocumentIngestor, IngestReport

__all__ = [
    "DocumentIngestor",
    "IngestReport",
    "chunk_text",
]

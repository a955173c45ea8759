"""Pydantic schemas for API request/response models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# ========== Request Schemas ==========


class AskRequest(BaseModel):
    """Request model for /ask endpoint."""

    question: str = Field(..., min_length=1, description="Question to answer")
    user_id: str = Field(default="api", min_length=1, description="Caller identifier")

    @field_validator("question")
    @classmethod
    def question_must_not_be_empty(cls, v: str) -> str:
        """Validate question is not just whitespace."""
        if not v.strip():
            raise ValueError("question cannot be empty or whitespace")
        return v.strip()


class SearchRequest(BaseModel):
    """Request model for /search endpoint."""

    query: str = Field(..., min_length=1, description="Search query")
    top_k: int = Field(default=5, ge=1, le=50, description="Number of results to return")
    min_similarity: Optional[float] = Field(
        default=None, ge=-1.0, le=1.0, description="Minimum cosine similarity (config default if omitted)"
    )

    @field_validator("query")
    @classmethod
    def query_must_not_be_empty(cls, v: str) -> str:
        """Validate query is not just whitespace."""
        if not v.strip():
            raise ValueError("query cannot be empty or whitespace")
        return v.strip()


# ========== Response Schemas ==========


class AskResponse(BaseModel):
    """Response model for /ask endpoint."""

    answer: str = Field(..., description="Answer text")


class SearchResult(BaseModel):
    """A single knowledge index hit."""

    id: str = Field(..., description="Chunk identifier")
    content: str = Field(..., description="Chunk text")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")
    similarity: float = Field(..., description="Cosine similarity to the query")


class SearchResponse(BaseModel):
    """Response model for /search endpoint."""

    query: str
    results: List[SearchResult]
    retrieval_time_ms: int


class StatsResponse(BaseModel):
    """Response model for /stats endpoint."""

    total_chunks: int
    sources: List[str]
    avg_chunk_length: int

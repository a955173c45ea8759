"""Search and stats endpoints over the knowledge index."""

import asyncio
import time

from fastapi import APIRouter, Depends, HTTPException

from buddy.api.dependencies import get_config, get_index
from buddy.api.schemas import SearchRequest, SearchResponse, SearchResult, StatsResponse
from buddy.config import AppConfig
from buddy.errors import ProviderError
from buddy.storage.vectorstore import KnowledgeIndex

router = APIRouter(tags=["search"])


@router.post("/search", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    index: KnowledgeIndex = Depends(get_index),
    config: AppConfig = Depends(get_config),
) -> SearchResponse:
    """Semantic search without LLM generation.

    Raises:
        HTTPException: 502 if the embedding provider fails, 500 otherwise
    """
    min_similarity = (
        request.min_similarity
        if request.min_similarity is not None
        else config.retrieval.min_similarity
    )
    try:
        start_time = time.time()
        results = await asyncio.to_thread(
            index.search, request.query, top_k=request.top_k, min_similarity=min_similarity
        )
        retrieval_time_ms = int((time.time() - start_time) * 1000)
    except ProviderError as e:
        raise HTTPException(status_code=502, detail=f"Search failed: {e}") from e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Search failed: {e}") from e

    return SearchResponse(
        query=request.query,
        results=[SearchResult(**r.to_dict()) for r in results],
        retrieval_time_ms=retrieval_time_ms,
    )


@router.get("/stats", response_model=StatsResponse)
async def stats(index: KnowledgeIndex = Depends(get_index)) -> StatsResponse:
    return StatsResponse(**index.get_stats().to_dict())

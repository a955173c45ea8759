"""Embedding client and vector similarity."""

import logging
from typing import List, Sequence

import httpx
import numpy as np

from buddy.errors import DimensionMismatch, ProviderError

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """OpenAI-compatible embeddings adapter.

    Uses the ``/embeddings`` endpoint via httpx. Vectors come back in the same
    order as the input texts.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = "text-embedding-3-small",
        base_url: str = "https://api.openai.com/v1",
        batch_size: int = 100,
        timeout: float = 30.0,
    ):
        """Initialize the embedding client.

        Args:
            api_key: Provider API key
            model: Embedding model name
            base_url: API base URL (no trailing ``/embeddings``)
            batch_size: Maximum number of texts per request
            timeout: Request timeout in seconds
        """
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required for embeddings")
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")

        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._batch_size = batch_size
        self._timeout = timeout

    @property
    def model(self) -> str:
        return self._model

    def embed(self, text: str) -> List[float]:
        """Embed a single text.

        Args:
            text: Text to embed

        Returns:
            Embedding vector
        """
        return self._request(text, expected=1)[0]

    def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        """Embed many texts, preserving input order.

        Args:
            texts: Texts to embed

        Returns:
            One embedding vector per input text

        Raises:
            ProviderError: If any request fails; no partial result is returned
        """
        texts = list(texts)
        vectors: List[List[float]] = []
        for i in range(0, len(texts), self._batch_size):
            batch = texts[i : i + self._batch_size]
            vectors.extend(self._request(batch, expected=len(batch)))
        return vectors

    def _request(self, payload_input: str | List[str], expected: int) -> List[List[float]]:
        data = {
            "model": self._model,
            "input": payload_input,
            "encoding_format": "float",
        }
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.post(f"{self._base_url}/embeddings", json=data, headers=headers)
                response.raise_for_status()
                result = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Embeddings API error: {e.response.status_code} - {_error_message(e.response)}"
            ) from e
        except httpx.TimeoutException as e:
            raise ProviderError(f"Embeddings API timed out after {self._timeout}s") from e
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Embeddings API request failed: {e}") from e

        vectors = _extract_vectors(result, expected)

        usage = result.get("usage") or {}
        logger.debug(
            "Embedded %d text(s) with %s (%s tokens)",
            expected,
            self._model,
            usage.get("total_tokens", "?"),
        )
        return vectors


def _extract_vectors(result: dict, expected: int) -> List[List[float]]:
    """Pull vectors out of an embeddings response, ordered by ``index``."""
    items = result.get("data") if isinstance(result, dict) else None
    if not isinstance(items, list):
        raise ProviderError(f"Embeddings API returned unexpected response: {result}")

    by_index = {}
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            continue
        index = item.get("index", position)
        embedding = item.get("embedding")
        if isinstance(embedding, list) and embedding:
            by_index[index] = embedding

    vectors = []
    for i in range(expected):
        if i not in by_index:
            raise ProviderError(f"Embeddings API response is missing the vector for input {i}")
        vectors.append(by_index[i])
    return vectors


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.text




def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two equal-length vectors.

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        DimensionMismatch: If the vectors differ in length
    """
    if len(a) != len(b):
        raise DimensionMismatch(f"Vectors must have the same length ({len(a)} != {len(b)})")

    va = np.asarray(a, dtype=float)
    vb = np.asarray(b, dtype=float)
    magnitude = np.linalg.norm(va) * np.linalg.norm(vb)
    if magnitude == 0:
        return 0.0
    return float(np.dot(va, vb) / magnitude)


def cosine_similarities(query: Sequence[float], matrix: np.ndarray) -> np.ndarray:
    """Cosine similarity of ``query`` against every row of ``matrix``.

    Rows (or a query) with zero magnitude score 0.0.

    Raises:
        DimensionMismatch: If the query length differs from the row length
    """
    q = np.asarray(query, dtype=float)
    if matrix.ndim != 2 or matrix.shape[1] != q.shape[0]:
        raise DimensionMismatch(
            f"Query has {q.shape[0]} dimensions, index rows have {matrix.shape[-1]}"
        )

    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)
    dots = matrix @ q
    scores = np.zeros(len(matrix), dtype=float)
    nonzero = norms > 0
    scores[nonzero] = dots[nonzero] / norms[nonzero]
    return scores

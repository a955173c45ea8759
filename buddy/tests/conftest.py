"""Shared fixtures for buddy tests."""

import pytest

from buddy.domain.chunk import Chunk
from buddy.storage.vectorstore import KnowledgeIndex


class FakeEmbeddings:
    """Embedding client stand-in returning fixed vectors per text."""

    def __init__(self, vectors=None, default=(1.0, 0.0, 0.0)):
        self.vectors = dict(vectors or {})
        self.default = list(default)
        self.calls = []

    @property
    def model(self):
        return "fake-embedding"

    def embed(self, text):
        self.calls.append([text])
        return list(self.vectors.get(text, self.default))

    def embed_batch(self, texts):
        texts = list(texts)
        self.calls.append(texts)
        return [list(self.vectors.get(t, self.default)) for t in texts]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials and overrides out of the tests."""
    for name in (
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "LLM_PROVIDER",
        "BUDDY_INDEX_PATH",
        "BUDDY_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_embeddings():
    return FakeEmbeddings()


@pytest.fixture
def index_path(tmp_path):
    return tmp_path / "data" / "vector-store.json"


@pytest.fixture
def index(index_path, fake_embeddings):
    return KnowledgeIndex(index_path, fake_embeddings)


def make_chunk(id, source="handbook", embedding=(1.0, 0.0, 0.0), content=None, **metadata):
    return Chunk(
        id=id,
        content=content if content is not None else f"content of {id}",
        embedding=list(embedding),
        metadata={"source": source, **metadata},
    )


@pytest.fixture(name="make_chunk")
def make_chunk_fixture():
    return make_chunk

"""Tests for CLI commands."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, Mock, patch

import pytest
from click.testing import CliRunner

from buddy.cli import cli
from buddy.llm.base import LLMResponse
from buddy.storage.vectorstore import KnowledgeIndex


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from replacing pytest's log handlers."""
    with patch("buddy.cli.configure_logging"):
        yield


@pytest.fixture
def config_file(tmp_path, index_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        f"""
storage:
  index_path: {index_path}

chunking:
  chunk_size: 100
  overlap: 20
"""
    )
    return path


@pytest.fixture
def kb_file(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(
        json.dumps(
            {
                "documents": [
                    {"content": "x" * 250, "source": "handbook", "category": "policies"},
                    {"content": "Welcome!", "source": "welcome"},
                    {"source": "broken"},
                ]
            }
        )
    )
    return path


def _invoke(config_file, *args, **kwargs):
    return CliRunner().invoke(cli, ["--config", str(config_file), *args], **kwargs)


class TestIngestCommand:
    def test_ingest(self, config_file, kb_file, index_path, fake_embeddings):
        with patch("buddy.container.build_embeddings", return_value=fake_embeddings):
            result = _invoke(config_file, "ingest", str(kb_file))

        assert result.exit_code == 0, result.output
        assert "✓ Ingested: 2/3 documents" in result.output
        assert "Skipped: 1" in result.output
        # 250 chars at 100/20 -> 3 chunks, plus 1
        assert "Chunks: 4" in result.output

        index = KnowledgeIndex(index_path)
        assert index.get_stats().sources == ["handbook", "welcome"]

    def test_ingest_overrides(self, config_file, kb_file, fake_embeddings):
        with patch("buddy.container.build_embeddings", return_value=fake_embeddings):
            result = _invoke(config_file, "ingest", str(kb_file), "--chunk-size", "250", "--overlap", "0")

        assert result.exit_code == 0, result.output
        assert "Chunks: 2" in result.output

    def test_ingest_bad_overlap(self, config_file, kb_file):
        result = _invoke(config_file, "ingest", str(kb_file), "--chunk-size", "50", "--overlap", "50")

        assert result.exit_code == 2
        assert "overlap" in result.output

    def test_ingest_without_api_key(self, config_file, kb_file):
        result = _invoke(config_file, "ingest", str(kb_file))

        assert result.exit_code == 1
        assert "Ingestion failed" in result.output

    def test_ingest_missing_file(self, config_file, tmp_path, fake_embeddings):
        with patch("buddy.container.build_embeddings", return_value=fake_embeddings):
            result = _invoke(config_file, "ingest", str(tmp_path / "missing.json"))

        assert result.exit_code == 1
        assert "not found" in result.output


class TestIndexCommands:
    @pytest.fixture(autouse=True)
    def populated(self, index_path, make_chunk):
        index = KnowledgeIndex(index_path)
        index.add_chunks(
            [
                make_chunk("a-chunk-0", source="a", content="x" * 10),
                make_chunk("a-chunk-1", source="a", content="x" * 20),
                make_chunk("b-chunk-0", source="b", content="x" * 30),
            ]
        )
        index.save()

    def test_stats(self, config_file):
        result = _invoke(config_file, "stats")

        assert result.exit_code == 0, result.output
        assert "Total chunks: 3" in result.output
        assert "Avg chunk length: 20" in result.output
        assert "- a" in result.output

    def test_stats_json(self, config_file):
        result = _invoke(config_file, "stats", "--json")

        assert json.loads(result.output) == {
            "total_chunks": 3,
            "sources": ["a", "b"],
            "avg_chunk_length": 20,
        }

    def test_delete(self, config_file, index_path):
        result = _invoke(config_file, "delete", "a")

        assert result.exit_code == 0
        assert "Deleted 2 chunks from a" in result.output
        assert KnowledgeIndex(index_path).get_stats().sources == ["b"]

    def test_clear_requires_confirmation(self, config_file, index_path):
        result = _invoke(config_file, "clear", input="n\n")

        assert result.exit_code == 1
        assert len(KnowledgeIndex(index_path)) == 3

    def test_clear_yes(self, config_file, index_path):
        result = _invoke(config_file, "clear", "--yes")

        assert result.exit_code == 0
        assert "Cleared" in result.output
        assert len(KnowledgeIndex(index_path)) == 0


class TestAskCommand:
    def test_ask(self, config_file):
        llm = Mock()
        llm.model = "test-model"
        llm.chat = AsyncMock(return_value=LLMResponse(content="Welcome to the team!", model="test-model"))

        with patch("buddy.container.create_llm", return_value=llm):
            result = _invoke(config_file, "ask", "hello", "--user-id", "U1")

        assert result.exit_code == 0, result.output
        assert "Welcome to the team!" in result.output

    def test_ask_without_llm_key(self, config_file):
        result = _invoke(config_file, "ask", "hello")

        assert result.exit_code == 1
        assert "No LLM API key" in result.output


def test_missing_config_file(tmp_path):
    result = CliRunner().invoke(cli, ["--config", str(tmp_path / "nope.yaml"), "stats"])

    assert result.exit_code == 1
    assert "Configuration error" in result.output

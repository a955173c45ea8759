"""Application configuration."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG_PATH = "config.yaml"


@dataclass(frozen=True)
class LLMConfig:
    provider: str = "auto"
    model: str | None = None
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    openai_base_url: str = "https://api.openai.com/v1"
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    temperature: float = 0.7
    max_tokens: int = 1024
    timeout: float = 30.0


@dataclass(frozen=True)
class EmbeddingConfig:
    model: str = "text-embedding-3-small"
    api_key: str | None = None
    base_url: str = "https://api.openai.com/v1"
    batch_size: int = 100
    timeout: float = 30.0


@dataclass(frozen=True)
class ChunkingConfig:
    chunk_size: int = 1000
    overlap: int = 200


@dataclass(frozen=True)
class StorageConfig:
    index_path: str = "data/vector-store.json"


@dataclass(frozen=True)
class RetrievalConfig:
    top_k: int = 5
    min_similarity: float = 0.5


@dataclass(frozen=True)
class AgentConfig:
    company_name: str = "Risidio"
    product_name: str = "Lunim"
    escalation_hint: str = "reach out to your manager or in #ask-anything"


@dataclass(frozen=True)
class APIConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    embedding: EmbeddingConfig = field(default_factory=EmbeddingConfig)
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    retrieval: RetrievalConfig = field(default_factory=RetrievalConfig)
    agent: AgentConfig = field(default_factory=AgentConfig)
    api: APIConfig = field(default_factory=APIConfig)


_SECTIONS = {
    "llm": LLMConfig,
    "embedding": EmbeddingConfig,
    "chunking": ChunkingConfig,
    "storage": StorageConfig,
    "retrieval": RetrievalConfig,
    "agent": AgentConfig,
    "api": APIConfig,
}


def _expand_env_var(value: str) -> str:
    """Expand environment variables in the form ${VAR:-default} or ${VAR}."""
    pattern = r"\$\{([^:}]+)(?::-([^}]*))?\}"

    def replace_env(match):
        return os.environ.get(match.group(1), match.group(2) or "")

    return re.sub(pattern, replace_env, value)


def _expand_env(value):
    """Recursively expand env vars in strings inside dicts/lists."""
    if isinstance(value, str):
        return _expand_env_var(value)
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    return value


def _coalesce(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        # A section with every key commented out parses as None
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _coalesce(merged[key], value)
        else:
            merged[key] = value
    return merged


def _from_dict(data: dict[str, Any]) -> AppConfig:
    unknown = set(data) - set(_SECTIONS)
    if unknown:
        raise ValueError(f"Unknown config section(s): {', '.join(sorted(unknown))}")
    return AppConfig(**{name: cls(**data.get(name, {})) for name, cls in _SECTIONS.items()})


def _apply_env(config: AppConfig) -> AppConfig:
    """Fill secrets and a few deploy-time knobs from the environment."""
    openai_key = os.getenv("OPENAI_API_KEY") or None
    anthropic_key = os.getenv("ANTHROPIC_API_KEY") or None

    llm = replace(
        config.llm,
        openai_api_key=config.llm.openai_api_key or openai_key,
        anthropic_api_key=config.llm.anthropic_api_key or anthropic_key,
        provider=os.getenv("LLM_PROVIDER") or config.llm.provider,
    )
    embedding = replace(config.embedding, api_key=config.embedding.api_key or openai_key)

    storage = config.storage
    if index_path := os.getenv("BUDDY_INDEX_PATH"):
        storage = replace(storage, index_path=index_path)

    return replace(config, llm=llm, embedding=embedding, storage=storage)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load configuration from YAML/JSON, merged over defaults, then env.

    Without an explicit path, ``$BUDDY_CONFIG`` and then ``./config.yaml`` are
    tried; if neither exists the defaults are used. A relative
    ``storage.index_path`` in a config file is resolved against the file's
    directory.
    """
    if path is None:
        path = os.getenv("BUDDY_CONFIG")
        if path is None and Path(DEFAULT_CONFIG_PATH).exists():
            path = DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")

        raw = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw) or {}

    defaults = AppConfig()
    default_dict = {name: dict(getattr(defaults, name).__dict__) for name in _SECTIONS}
    data = _expand_env(data)
    config = _from_dict(_coalesce(default_dict, data))

    if path is not None and "index_path" in (data.get("storage") or {}):
        index_path = resolve_path(config.storage.index_path, path.parent)
        config = replace(config, storage=replace(config.storage, index_path=str(index_path)))

    return _apply_env(config)


def resolve_path(value: str, base: Path | None = None) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    base = base or Path.cwd()
    return (base / path).resolve()

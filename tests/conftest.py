"""Shared pytest fixtures for catalog-gen tests."""

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml


@pytest.fixture
def mock_model_data() -> dict[str, Any]:
    """Sample model record as it appears in a catalog document."""
    return {
        "id": "Qwen3-8B-Q8_0",
        "category": "llm/chat",
        "owned_by": "Qwen",
        "gated_model": False,
        "web_page": "https://huggingface.co/Qwen/Qwen3-8B-GGUF",
        "files": {
            "models": [
                {"url": "Qwen/Qwen3-8B-GGUF/Qwen3-8B-Q8_0.gguf", "size": "8.71 GB"},
            ],
        },
        "capabilities": {
            "streaming": True,
            "reasoning": True,
            "tooling": True,
        },
        "metadata": {
            "created": "2025-04-28T00:00:00Z",
            "description": "Qwen3 8B chat model.\nSupports thinking mode.\n",
        },
        "config": {
            "context-window": 32768,
        },
    }


@pytest.fixture
def mock_catalog_data(mock_model_data: dict[str, Any]) -> dict[str, Any]:
    """Sample catalog document with three models."""
    return {
        "catalog": "chat",
        "models": [
            mock_model_data,
            {
                "id": "gemma-3-4b-it-q4_0",
                "category": "image/text-to-text",
                "owned_by": "Google",
                "gated_model": True,
                "web_page": "https://huggingface.co/google/gemma-3-4b-it-qat-q4_0-gguf",
                "files": {
                    "models": [{"url": "gemma-3-4b-it-q4_0.gguf", "size": "3.16 GB"}],
                    "proj": {"url": "mmproj-model-f16-4B.gguf", "size": "851 MB"},
                },
                "capabilities": {"streaming": True, "images": True},
                "metadata": {"created": "2025-03-12T00:00:00Z", "description": ""},
                "config": {"context-window": 8192},
            },
            {
                "id": "Bge-Small-EN",
                "category": "embedding",
                "owned_by": "BAAI",
                "web_page": "https://huggingface.co/BAAI/bge-small-en-v1.5",
                "files": {"models": [{"url": "bge-small-en.gguf", "size": "67 MB"}]},
                "capabilities": {"embedding": True},
            },
        ],
    }


@pytest.fixture
def write_catalog_file(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper that writes a catalog document into tmp_path/catalogs."""
    catalogs_dir = tmp_path / "catalogs"
    catalogs_dir.mkdir()

    def _write(name: str, data: Any) -> Path:
        path = catalogs_dir / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        return path

    return _write

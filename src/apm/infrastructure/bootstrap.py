"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from apm.infrastructure.persistence.json_article_repository import (
    JsonArticleRepository,
)

DATA_DIR_ENV = "APM_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_data_dir: Path | None = None


def configure(data_dir: Path | None) -> None:
    """Override the data directory (called once by the CLI entry point)."""
    global _data_dir
    _data_dir = data_dir


def data_dir() -> Path:
    if _data_dir is not None:
        return _data_dir
    env_value = os.environ.get(DATA_DIR_ENV)
    if env_value:
        return Path(env_value)
    return _DEFAULT_DATA_DIR


def article_repository() -> JsonArticleRepository:
    return JsonArticleRepository(data_dir() / "articles.json")

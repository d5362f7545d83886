"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from smartcart.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from smartcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_DEFAULT_DATA_DIR = _PROJECT_ROOT / "data"

load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")


def data_dir() -> Path:
    """``SMARTCART_DATA_DIR`` if set, else ``<project root>/data``."""
    override = os.getenv("SMARTCART_DATA_DIR")
    if override is not None and override.strip():
        return Path(override.strip())
    return _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "catalog.json")


def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository.from_json(data_dir() / "users.json")

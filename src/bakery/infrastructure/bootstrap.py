"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from bakery.application.product_store import ProductStore
from bakery.infrastructure.persistence.json_snapshot_repository import (
    JsonSnapshotRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

PRODUCTS_FILE = "products.json"


def data_dir(override: str | Path | None = None) -> Path:
    """Directory holding the store file.

    An explicit override wins, then ``BAKERY_DATA_DIR``, then ``./data``
    under the project root.
    """
    if override:
        return Path(override)
    env = os.getenv("BAKERY_DATA_DIR")
    if env:
        return Path(env)
    return _DEFAULT_DATA_DIR


def snapshot_repository(directory: str | Path | None = None) -> JsonSnapshotRepository:
    return JsonSnapshotRepository(data_dir(directory) / PRODUCTS_FILE)


def product_store(directory: str | Path | None = None) -> ProductStore:
    return ProductStore(snapshot_repository(directory))

"""JSON-file-backed implementation of SnapshotRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from bakery.domain.model.product import Category, Product
from bakery.domain.model.value_objects import Quantity
from bakery.domain.repository.snapshot_repository import (
    SnapshotRepository,
    StoreSnapshot,
)


class JsonSnapshotRepository(SnapshotRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SnapshotRepository interface -----------------------------------------

    def load(self) -> StoreSnapshot:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return StoreSnapshot(
            next_id=raw.get("next_id", 1),
            products=[self._to_domain(item) for item in raw.get("products", [])],
        )

    def save(self, snapshot: StoreSnapshot) -> None:
        raw = {
            "next_id": snapshot.next_id,
            "products": [self._to_raw(p) for p in snapshot.products],
        }
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category.value,
            "quantity": product.quantity.value,
            "created_at": product.created_at.isoformat(),
            "updated_at": (
                product.updated_at.isoformat() if product.updated_at else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        updated_at = raw.get("updated_at")
        return Product(
            id=raw["id"],
            name=raw["name"],
            category=Category.parse(raw["category"]),
            quantity=Quantity(raw["quantity"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self.save(StoreSnapshot())

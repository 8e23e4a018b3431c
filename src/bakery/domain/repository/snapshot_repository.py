"""Abstract durable substrate for the product store.

The store reads one full snapshot when it starts and writes a full
snapshot back after every mutation. Defined in the domain layer so the
domain never depends on infrastructure; concrete implementations (JSON,
in-memory) live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bakery.domain.model.product import Product


@dataclass
class StoreSnapshot:
    """Everything needed to restore a store: the records and the counter."""

    next_id: int = 1
    products: list[Product] = field(default_factory=list)


class SnapshotRepository(ABC):

    @abstractmethod
    def load(self) -> StoreSnapshot:
        """Return the last saved snapshot, or an empty one."""

    @abstractmethod
    def save(self, snapshot: StoreSnapshot) -> None:
        """Persist the full state of the store."""

"""Data Transfer Objects: plain containers that cross layer boundaries.

Payloads carry caller input into the store without exposing the
domain's value objects to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.model.product import Category


@dataclass(frozen=True)
class ProductPayload:
    """Input for creating or fully updating a product."""

    name: str
    quantity: int
    category: Category | str


@dataclass(frozen=True)
class StockPayload:
    """Input for a stock adjustment."""

    amount: int

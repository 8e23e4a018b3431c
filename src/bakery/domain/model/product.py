"""Product aggregate.

A product is a named, categorised line in the ledger together with the
number of units on hand. Stock arithmetic and its guards live here so a
product can never hold a quantity outside the unsigned 32-bit range.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from bakery.domain.exceptions import InvalidOperationError
from bakery.domain.model.value_objects import MAX_QUANTITY, Quantity


class Category(Enum):
    BAKERY = "Bakery"
    CAKE = "Cake"
    COOKIES = "Cookies"

    @classmethod
    def parse(cls, raw: str | Category) -> Category:
        """Look a category up by name or value, ignoring case."""
        if isinstance(raw, Category):
            return raw
        wanted = str(raw).strip().lower()
        for member in cls:
            if wanted in (member.name.lower(), member.value.lower()):
                return member
        choices = ", ".join(m.value for m in cls)
        raise InvalidOperationError(
            f"Unknown category {raw!r} (expected one of: {choices})"
        )


@dataclass
class Product:
    """Aggregate root for a stocked product.

    ``id`` and ``created_at`` never change after creation. Every other
    mutation goes through a method that stamps ``updated_at``.
    """

    id: int
    name: str
    category: Category
    quantity: Quantity
    created_at: datetime
    updated_at: datetime | None = None

    def replace_details(
        self,
        name: str,
        quantity: Quantity,
        category: Category,
        now: datetime,
    ) -> None:
        """Overwrite every mutable field at once."""
        self.name = name
        self.quantity = quantity
        self.category = category
        self.updated_at = now

    def add_stock(self, amount: Quantity, now: datetime) -> None:
        """Increase the quantity on hand.

        Raises InvalidOperationError if the result would not fit in an
        unsigned 32-bit count.
        """
        if not self.quantity.can_add(amount):
            raise InvalidOperationError(
                f"Cannot add {amount} to product with id={self.id}: "
                f"quantity would exceed {MAX_QUANTITY}"
            )
        self.quantity = self.quantity + amount
        self.updated_at = now

    def offload_stock(self, amount: Quantity, now: datetime) -> None:
        """Take units out of stock.

        Raises InvalidOperationError if more is requested than is on hand.
        """
        if amount.value > self.quantity.value:
            if self.quantity.value == 0:
                raise InvalidOperationError(
                    f"Product with id={self.id} cannot be offloaded "
                    f"because the quantity is 0"
                )
            raise InvalidOperationError(
                "Cannot offload more than available quantity. "
                f"Available: {self.quantity}, Trying to offload: {amount}"
            )
        self.quantity = self.quantity - amount
        self.updated_at = now

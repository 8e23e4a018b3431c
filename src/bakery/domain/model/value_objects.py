"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.exceptions import InvalidOperationError

MAX_QUANTITY = 2**32 - 1
MAX_PRODUCT_ID = 2**64 - 1


@dataclass(frozen=True)
class Quantity:
    """A count of units that fits an unsigned 32-bit integer.

    Zero is allowed: a product can be sold out.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidOperationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidOperationError(
                f"Quantity cannot be negative, got {self.value}"
            )
        if self.value > MAX_QUANTITY:
            raise InvalidOperationError(
                f"Quantity cannot exceed {MAX_QUANTITY}, got {self.value}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def can_add(self, other: Quantity) -> bool:
        return self.value + other.value <= MAX_QUANTITY

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __sub__(self, other: Quantity) -> Quantity:
        return Quantity(self.value - other.value)

    def __str__(self) -> str:
        return str(self.value)

"""Application service: the product store.

ProductStore owns every product record and the identifier counter. It
loads its state from a SnapshotRepository once, applies each operation
as a single validated step, and writes the full snapshot back after
every successful mutation. Records handed to callers are copies.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, NoReturn

import structlog

from bakery.application.dto import ProductPayload, StockPayload
from bakery.domain.exceptions import EntityNotFoundError, InvalidOperationError
from bakery.domain.model.product import Category, Product
from bakery.domain.model.value_objects import MAX_PRODUCT_ID, Quantity
from bakery.domain.repository.snapshot_repository import (
    SnapshotRepository,
    StoreSnapshot,
)

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate_product_payload(
    payload: ProductPayload,
) -> tuple[str, Quantity, Category]:
    if not payload.name or not payload.name.strip():
        raise InvalidOperationError("Product name cannot be empty.")
    return (
        payload.name.strip(),
        Quantity(payload.quantity),
        Category.parse(payload.category),
    )


class ProductStore:

    def __init__(self, repository: SnapshotRepository, clock: Clock = utcnow) -> None:
        self._repository = repository
        self._clock = clock

        snapshot = repository.load()
        self._products: dict[int, Product] = {
            p.id: replace(p) for p in snapshot.products
        }
        # A stale counter must never hand out an id that is already stored.
        self._next_id = max(snapshot.next_id, max(self._products, default=0) + 1)
        logger.debug(
            "Product store loaded",
            products=len(self._products),
            next_id=self._next_id,
        )

    # --- Commands -------------------------------------------------------------

    def add_product(self, payload: ProductPayload) -> Product:
        """Create a product with a fresh id and no ``updated_at``."""
        name, quantity, category = _validate_product_payload(payload)
        product_id = self._allocate_id()

        product = Product(
            id=product_id,
            name=name,
            category=category,
            quantity=quantity,
            created_at=self._clock(),
        )
        self._commit({**self._products, product.id: product}, next_id=product_id + 1)

        logger.info(
            "Product added",
            product_id=product.id,
            name=product.name,
            category=product.category.value,
            quantity=product.quantity.value,
        )
        return replace(product)

    def update_product(self, product_id: int, payload: ProductPayload) -> Product:
        name, quantity, category = _validate_product_payload(payload)
        if product_id not in self._products:
            self._reject(
                EntityNotFoundError(f"Product with id={product_id} not found"),
                "update_product",
            )

        product = replace(self._products[product_id])
        product.replace_details(name, quantity, category, now=self._clock())
        self._commit({**self._products, product_id: product})

        logger.info("Product updated", product_id=product_id)
        return replace(product)

    def remove_product(self, product_id: int) -> Product:
        """Delete a product and hand back the record that was removed."""
        if product_id not in self._products:
            self._reject(
                EntityNotFoundError(
                    f"Couldn't delete a product with id={product_id}. Product not found"
                ),
                "remove_product",
            )

        products = dict(self._products)
        removed = products.pop(product_id)
        self._commit(products)

        logger.info("Product removed", product_id=product_id)
        return removed

    def add_quantity(self, product_id: int, payload: StockPayload) -> Product:
        amount = Quantity(payload.amount)
        if product_id not in self._products:
            self._reject(
                EntityNotFoundError(
                    f"Couldn't add quantity to product with id={product_id}. "
                    "Product not found"
                ),
                "add_quantity",
            )

        product = replace(self._products[product_id])
        try:
            product.add_stock(amount, now=self._clock())
        except InvalidOperationError as exc:
            self._reject(exc, "add_quantity")
        self._commit({**self._products, product_id: product})

        logger.info(
            "Stock added",
            product_id=product_id,
            amount=amount.value,
            quantity=product.quantity.value,
        )
        return replace(product)

    def offload_quantity(self, product_id: int, payload: StockPayload) -> Product:
        amount = Quantity(payload.amount)
        if product_id not in self._products:
            self._reject(
                EntityNotFoundError(
                    f"Couldn't offload a product with id={product_id}. "
                    "Product not found"
                ),
                "offload_quantity",
            )

        product = replace(self._products[product_id])
        try:
            product.offload_stock(amount, now=self._clock())
        except InvalidOperationError as exc:
            self._reject(exc, "offload_quantity")
        self._commit({**self._products, product_id: product})

        logger.info(
            "Stock offloaded",
            product_id=product_id,
            amount=amount.value,
            quantity=product.quantity.value,
        )
        return replace(product)

    def clear_all_products(self) -> None:
        """Drop every record. The id counter keeps counting."""
        removed = len(self._products)
        self._commit({})

        logger.info("All products cleared", removed=removed, next_id=self._next_id)

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: int) -> Product:
        return replace(self._require(product_id))

    def get_stock(self, product_id: int) -> int:
        return self._require(product_id).quantity.value

    def list_all_products(self) -> list[Product]:
        return [replace(p) for p in self._products.values()]

    def search_by_category(self, category: Category | str) -> list[Product]:
        wanted = Category.parse(category)
        return [replace(p) for p in self._products.values() if p.category == wanted]

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"A product with id={product_id} was not found")
        return product

    def _allocate_id(self) -> int:
        if self._next_id > MAX_PRODUCT_ID:
            self._reject(
                InvalidOperationError("Failed to generate a unique ID."),
                "add_product",
            )
        return self._next_id

    def _commit(self, products: dict[int, Product], next_id: int | None = None) -> None:
        """Save the new state, then adopt it.

        If the repository raises, the in-memory state is left as it was.
        """
        next_id = self._next_id if next_id is None else next_id
        self._repository.save(
            StoreSnapshot(
                next_id=next_id,
                products=[replace(p) for p in products.values()],
            )
        )
        self._products = products
        self._next_id = next_id


    @staticmethod
    def _reject(
        exc: InvalidOperationError | EntityNotFoundError, operation: str
    ) -> NoReturn:
        logger.warning(
            "Operation rejected",
            operation=operation,
            kind=exc.kind,
            reason=exc.msg,
        )
        raise exc

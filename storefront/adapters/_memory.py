"""
In-memory repositories.

Note: single-process only (tests, demos). Nothing survives a restart.
Objects are deep-copied on the way in and out, so a caller mutating an
aggregate it has not persisted never changes what the store holds.
"""

from __future__ import annotations

import asyncio
from copy import deepcopy

from kungfu import Ok, Error

from storefront._types import Outcome
from storefront.domain import (
    PersistenceError,
    Product,
    ProductNotFoundError,
    Purchasable,
    PurchaseNotFoundError,
    PurchaseStatus,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryProductRepository:
    """
    Dict-backed ProductRepository.

    Each call is atomic under the store lock. update() also checks the
    product version, so when two checkouts load the same product and both
    write it back, the second write is rejected with PersistenceError.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._rows: dict[str, Product] = {p.id: deepcopy(p) for p in products or ()}
        self._lock = asyncio.Lock()

    async def find_all(self) -> Outcome[list[Product]]:
        async with self._lock:
            return Ok([deepcopy(p) for p in self._rows.values()])

    async def find_by_id(self, product_id: str) -> Outcome[Product]:
        async with self._lock:
            product = self._rows.get(product_id)
            if product is None:
                return Error(ProductNotFoundError(product_id))
            return Ok(deepcopy(product))

    async def save(self, product: Product) -> Outcome[Product]:
        async with self._lock:
            self._rows[product.id] = deepcopy(product)
            return Ok(deepcopy(product))

    async def update(self, product: Product) -> Outcome[Product]:
        async with self._lock:
            if product.id not in self._rows:
                return Error(ProductNotFoundError(product.id))
            if self._rows[product.id].version != product.version:
                return Error(PersistenceError(f"Product {product.id} was modified concurrently"))
            product.version += 1
            self._rows[product.id] = deepcopy(product)
            return Ok(deepcopy(product))

    async def delete(self, product_id: str) -> Outcome[None]:
        async with self._lock:
            if self._rows.pop(product_id, None) is None:
                return Error(ProductNotFoundError(product_id))
            return Ok(None)


# ═══════════════════════════════════════════════════════════════════════════════
# Orders / Transactions
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryPurchaseRepository[P: Purchasable]:
    """Dict-backed PurchaseRepository for one purchase type."""

    def __init__(self, purchase_type: type[P]) -> None:
        self._purchase_type = purchase_type
        self._rows: dict[str, P] = {}
        self._lock = asyncio.Lock()

    async def find_all(self) -> Outcome[list[P]]:
        async with self._lock:
            return Ok([deepcopy(p) for p in self._rows.values()])

    async def find_by_id(self, purchase_id: str) -> Outcome[P]:
        async with self._lock:
            purchase = self._rows.get(purchase_id)
            if purchase is None:
                return Error(self._not_found(purchase_id))
            return Ok(deepcopy(purchase))

    async def find_by_status(
        self, status: PurchaseStatus
    ) -> Outcome[list[P]]:
        async with self._lock:
            return Ok([deepcopy(p) for p in self._rows.values() if p.status is status])

    async def save(self, purchase: P) -> Outcome[P]:
        async with self._lock:
            self._rows[purchase.id] = deepcopy(purchase)
            return Ok(deepcopy(purchase))

    async def update(self, purchase: P) -> Outcome[P]:
        async with self._lock:
            if purchase.id not in self._rows:
                return Error(self._not_found(purchase.id))
            self._rows[purchase.id] = deepcopy(purchase)
            return Ok(deepcopy(purchase))

    def _not_found(self, purchase_id: str) -> PurchaseNotFoundError:
        return PurchaseNotFoundError(self._purchase_type.kind, purchase_id)


__all__ = ("MemoryProductRepository", "MemoryPurchaseRepository")

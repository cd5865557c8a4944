"""
Repository ports — Result-based persistence contracts.

Note: adapters never raise for expected failures. A missing row is
Error(NotFoundError), a driver failure is Error(PersistenceError).

Concurrency: ProductRepository.update is the commit point for stock. The
payment flow does read → decrease_stock → update, so update must reject a
product whose `version` is no longer the stored one with
Error(PersistenceError), and bump the version on success. Both bundled
adapters do this.
"""

from __future__ import annotations

from typing import Protocol

from storefront._types import Outcome
from storefront.domain import Product, Purchasable, PurchaseStatus


class ProductRepository(Protocol):
    """
    Product persistence.

    Example — in-memory:

        repo = MemoryProductRepository()
        await repo.save(product)
        match await repo.find_by_id(product.id):
            case Ok(found): ...
            case Error(e): ...
    """

    async def find_all(self) -> Outcome[list[Product]]: ...

    async def find_by_id(self, product_id: str) -> Outcome[Product]: ...

    async def save(self, product: Product) -> Outcome[Product]: ...

    async def update(self, product: Product) -> Outcome[Product]: ...

    async def delete(self, product_id: str) -> Outcome[None]: ...


class PurchaseRepository[P: Purchasable](Protocol):
    """Order / Transaction persistence."""

    async def find_all(self) -> Outcome[list[P]]: ...

    async def find_by_id(self, purchase_id: str) -> Outcome[P]: ...

    async def find_by_status(
        self, status: PurchaseStatus
    ) -> Outcome[list[P]]: ...

    async def save(self, purchase: P) -> Outcome[P]: ...

    async def update(self, purchase: P) -> Outcome[P]: ...


__all__ = ("ProductRepository", "PurchaseRepository")

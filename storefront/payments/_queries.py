"""
Read-side use cases — catalog and purchase lookups.
"""

from __future__ import annotations

from storefront._types import Outcome
from storefront.domain import Order, Product, Purchasable, Transaction
from storefront.ports import ProductRepository, PurchaseRepository


class GetProducts:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    async def execute(self) -> Outcome[list[Product]]:
        return await self._products.find_all()


class GetProductById:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    async def execute(self, product_id: str) -> Outcome[Product]:
        return await self._products.find_by_id(product_id)


class GetPurchase[P: Purchasable]:
    """Fetch one Order/Transaction; a missing id is Error(NotFoundError)."""

    def __init__(self, purchases: PurchaseRepository[P]) -> None:
        self._purchases = purchases

    async def execute(self, purchase_id: str) -> Outcome[P]:
        return await self._purchases.find_by_id(purchase_id)


class GetOrder(GetPurchase[Order]):
    pass


class GetTransaction(GetPurchase[Transaction]):
    pass


__all__ = ("GetProducts", "GetProductById", "GetPurchase", "GetOrder", "GetTransaction")

"""
Create purchase — price a product and open a PENDING Order/Transaction.
"""

from __future__ import annotations

from loguru import logger

from kungfu import Ok, Error

from storefront._types import Outcome
from storefront.domain import (
    InsufficientStockError,
    InvalidQuantityError,
    Order,
    Purchasable,
    ShippingInfo,
    Transaction,
)
from storefront.ports import ProductRepository, PurchaseRepository


class CreatePurchase[P: Purchasable]:
    """
    Look up the product, check stock, freeze the total and save a PENDING purchase.

    Stock is only checked here, not reserved: the payment flow re-validates
    it after the gateway approves.
    """

    def __init__(
        self,
        purchase_type: type[P],
        purchases: PurchaseRepository[P],
        products: ProductRepository,
    ) -> None:
        self._purchase_type = purchase_type
        self._purchases = purchases
        self._products = products

    async def execute(
        self,
        product_id: str,
        quantity: int,
        shipping: ShippingInfo,
        customer_email: str,
    ) -> Outcome[P]:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            return Error(InvalidQuantityError(quantity))

        match await self._products.find_by_id(product_id):
            case Error(e):
                return Error(e)
            case Ok(product):
                pass

        if not product.has_stock(quantity):
            return Error(InsufficientStockError(
                product.id,
                quantity,
                product.stock,
                f"Insufficient stock. Available: {product.stock}, Requested: {quantity}",
            ))

        purchase = self._purchase_type.create(
            product_id=product.id,
            quantity=quantity,
            amount=product.calculate_total_price(quantity),
            shipping=shipping,
            customer_email=customer_email,
        )
        logger.bind(purchase_id=purchase.id, kind=purchase.kind).info(
            "Created {} x{} of {} for {}", purchase.kind, quantity, product.id, purchase.amount
        )
        return await self._purchases.save(purchase)


class CreateOrder(CreatePurchase[Order]):
    def __init__(
        self, orders: PurchaseRepository[Order], products: ProductRepository
    ) -> None:
        super().__init__(Order, orders, products)


class CreateTransaction(CreatePurchase[Transaction]):
    def __init__(
        self, transactions: PurchaseRepository[Transaction], products: ProductRepository
    ) -> None:
        super().__init__(Transaction, transactions, products)


__all__ = ("CreatePurchase", "CreateOrder", "CreateTransaction")

"""
Payments — use cases for buying a product.

    from storefront import payments as Pay

    create = Pay.CreateOrder(orders, products)
    process = Pay.ProcessOrderPayment(orders, products, gateway)

    match await create.execute(product_id, 2, shipping, "ana@example.com"):
        case Ok(order):
            result = await process.execute(order.id, PaymentMethod("CARD", token="tok"))
"""

from __future__ import annotations

from storefront.payments._create import CreatePurchase, CreateOrder, CreateTransaction
from storefront.payments._process import (
    ProcessPayment,
    ProcessOrderPayment,
    ProcessTransactionPayment,
)
from storefront.payments._queries import (
    GetProducts,
    GetProductById,
    GetPurchase,
    GetOrder,
    GetTransaction,
)

__all__ = (
    # Commands
    "CreatePurchase",
    "CreateOrder",
    "CreateTransaction",
    "ProcessPayment",
    "ProcessOrderPayment",
    "ProcessTransactionPayment",
    # Queries
    "GetProducts",
    "GetProductById",
    "GetPurchase",
    "GetOrder",
    "GetTransaction",
)

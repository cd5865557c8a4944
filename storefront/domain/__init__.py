"""
Domain — money, products, purchases and their errors.

    from storefront import domain as D

    product = D.Product("p-1", "Coffee", D.Money(Decimal("100000")), stock=10)
    order = D.Order.create(product.id, 2, product.calculate_total_price(2), shipping, email)
"""

from storefront.domain._errors import (
    StorefrontError,
    NotFoundError,
    ProductNotFoundError,
    PurchaseNotFoundError,
    InvalidStateError,
    NotPendingError,
    InvalidQuantityError,
    InsufficientStockError,
    GatewayError,
    PersistenceError,
)
from storefront.domain._money import Money, DEFAULT_CURRENCY
from storefront.domain._status import PurchaseStatus
from storefront.domain._product import Product
from storefront.domain._purchase import ShippingInfo, Purchasable, Order, Transaction

__all__ = (
    # Errors
    "StorefrontError",
    "NotFoundError",
    "ProductNotFoundError",
    "PurchaseNotFoundError",
    "InvalidStateError",
    "NotPendingError",
    "InvalidQuantityError",
    "InsufficientStockError",
    "GatewayError",
    "PersistenceError",
    # Values
    "Money",
    "DEFAULT_CURRENCY",
    "PurchaseStatus",
    # Aggregates
    "Product",
    "ShippingInfo",
    "Purchasable",
    "Order",
    "Transaction",
)

"""
Error taxonomy.

Every failure a port or use case reports is a StorefrontError carried inside
Error(...). Only Product.decrease_stock raises one (InsufficientStockError).
"""

from __future__ import annotations


class StorefrontError(Exception):
    """Base error: machine-readable code + human-readable message."""

    code = "STOREFRONT_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StorefrontError):
            return NotImplemented
        return type(self) is type(other) and (self.code, self.message) == (
            other.code,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))


# ═══════════════════════════════════════════════════════════════════════════════
# Lookups
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(StorefrontError):
    code = "NOT_FOUND"


class ProductNotFoundError(NotFoundError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with id {product_id} not found")
        self.product_id = product_id


class PurchaseNotFoundError(NotFoundError):
    def __init__(self, kind: str, purchase_id: str) -> None:
        super().__init__(
            f"{kind} with id {purchase_id} not found",
            code=f"{kind.upper()}_NOT_FOUND",
        )
        self.kind = kind
        self.purchase_id = purchase_id


# ═══════════════════════════════════════════════════════════════════════════════
# State
# ═══════════════════════════════════════════════════════════════════════════════


class InvalidStateError(StorefrontError):
    code = "INVALID_STATE"


class NotPendingError(InvalidStateError):
    code = "NOT_PENDING"

    def __init__(self, kind: str, purchase_id: str) -> None:
        super().__init__(f"{kind} {purchase_id} is not in PENDING state")
        self.kind = kind
        self.purchase_id = purchase_id


class InvalidQuantityError(StorefrontError):
    code = "INVALID_QUANTITY"

    def __init__(self, quantity: object) -> None:
        super().__init__(f"Quantity must be a positive integer, got {quantity}")
        self.quantity = quantity


class InsufficientStockError(StorefrontError):
    code = "INSUFFICIENT_STOCK"

    def __init__(
        self,
        product_id: str,
        requested: int,
        available: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message
            or f"Insufficient stock for product {product_id}. "
            f"Requested: {requested}, Available: {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


# ═══════════════════════════════════════════════════════════════════════════════
# Collaborators
# ═══════════════════════════════════════════════════════════════════════════════


class GatewayError(StorefrontError):
    """Payment gateway call failed (network, HTTP error, timeout)."""

    code = "PAYMENT_GATEWAY_ERROR"


class PersistenceError(StorefrontError):
    """Repository read or write failed."""

    code = "PERSISTENCE_ERROR"

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


__all__ = (
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
)

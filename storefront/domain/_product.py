"""
Product — catalog entry and stock ledger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from storefront.domain._errors import InsufficientStockError
from storefront.domain._money import Money


@dataclass(slots=True)
class Product:
    """
    Product with a mutable stock count.

    Invariant: stock is never negative. decrease_stock/increase_stock are the
    only ways stock changes.

    `version` is owned by the repositories: every successful update bumps it,
    and an update carrying a stale version is rejected.
    """

    id: str
    name: str
    price: Money
    stock: int
    category: str | None = None
    description: str | None = None
    image_url: str | None = None
    created_at: datetime = field(default_factory=datetime.now)
    version: int = 0

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValueError("Stock cannot be negative")

    def is_available(self) -> bool:
        return self.stock > 0

    def has_stock(self, quantity: int) -> bool:
        return self.stock >= quantity

    def calculate_total_price(self, quantity: int) -> Money:
        return self.price.multiply(quantity)

    def decrease_stock(self, quantity: int) -> None:
        """
        Take quantity units out of stock.

        Raises InsufficientStockError (stock untouched) if quantity > stock.
        """
        _require_positive(quantity)
        if not self.has_stock(quantity):
            raise InsufficientStockError(self.id, quantity, self.stock)
        self.stock -= quantity

    def increase_stock(self, quantity: int) -> None:
        _require_positive(quantity)
        self.stock += quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price.amount),
            "currency": self.price.currency,
            "stock": self.stock,
            "category": self.category,
            "description": self.description,
            "image_url": self.image_url,
            "created_at": self.created_at.isoformat(),
        }


def _require_positive(quantity: int) -> None:
    if quantity <= 0:
        raise ValueError("Quantity must be positive")


__all__ = ("Product",)

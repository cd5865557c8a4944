"""
Money value object.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

DEFAULT_CURRENCY = "COP"

_CENT = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class Money:
    """
    Immutable amount + currency.

    Amounts are Decimal quantized to cents; arithmetic returns new instances
    and never changes the currency.

    Example:
        price = Money(Decimal("100000"), "COP")
        total = price.multiply(2)   # Money(200000.00, COP)
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        amount = Decimal(str(self.amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
        if amount < 0:
            raise ValueError("Money amount cannot be negative")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", self.currency.upper())

    @classmethod
    def from_cents(cls, cents: int, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(Decimal(cents) / 100, currency)

    def to_cents(self) -> int:
        """Smallest currency unit, as submitted to the gateway."""
        return int((self.amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def add(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: int | Decimal) -> Money:
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


__all__ = ("Money", "DEFAULT_CURRENCY")

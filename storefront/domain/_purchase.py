"""
Purchasable — one purchase attempt (Order or Transaction).

Both aggregates share the same shape and the same status state machine:

    PENDING ──approve()──────▶ APPROVED
        │
        ├────decline()───────▶ DECLINED
        │
        └────mark_as_error()─▶ ERROR

Any transition out of a non-PENDING status raises InvalidStateError.
Re-applying the current status is a no-op, including its metadata: a second
mark_as_error keeps the first error message.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Self

from storefront.domain._errors import InvalidStateError
from storefront.domain._money import Money
from storefront.domain._status import PurchaseStatus


# ═══════════════════════════════════════════════════════════════════════════════
# Shipping Info
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ShippingInfo:
    first_name: str
    last_name: str
    address: str
    city: str
    postal_code: str


# ═══════════════════════════════════════════════════════════════════════════════
# Purchasable — Shared Aggregate
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, kw_only=True)
class Purchasable:
    """
    Base aggregate for Order and Transaction.

    Note: amount is product.price × quantity at creation time and is frozen
    afterwards; later product price changes never touch it.
    """

    kind: ClassVar[str] = "Purchase"

    id: str
    product_id: str
    quantity: int
    amount: Money
    first_name: str
    last_name: str
    address: str
    city: str
    postal_code: str
    customer_email: str
    status: PurchaseStatus = PurchaseStatus.PENDING
    gateway_transaction_id: str | None = None
    gateway_reference: str | None = None
    payment_method: str | None = None
    error_message: str | None = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        product_id: str,
        quantity: int,
        amount: Money,
        shipping: ShippingInfo,
        customer_email: str,
        id: str | None = None,
    ) -> Self:
        """New PENDING purchase with a generated UUID."""
        if quantity < 1:
            raise ValueError("Quantity must be positive")
        return cls(
            id=id or str(uuid.uuid4()),
            product_id=product_id,
            quantity=quantity,
            amount=amount,
            first_name=shipping.first_name,
            last_name=shipping.last_name,
            address=shipping.address,
            city=shipping.city,
            postal_code=shipping.postal_code,
            customer_email=customer_email,
        )

    @property
    def shipping(self) -> ShippingInfo:
        return ShippingInfo(
            self.first_name, self.last_name, self.address, self.city, self.postal_code
        )

    # ───────────────────────────────────────────────────────────────────────────
    # State machine
    # ───────────────────────────────────────────────────────────────────────────

    def update_status(
        self,
        new_status: PurchaseStatus,
        *,
        gateway_transaction_id: str | None = None,
        gateway_reference: str | None = None,
        payment_method: str | None = None,
        error_message: str | None = None,
    ) -> None:
        """Move to new_status; the same status returns early and ignores the metadata."""
        if self.status == new_status:
            return

        if not self.status.can_transition_to(new_status):
            raise InvalidStateError(
                f"Cannot transition to {new_status.value} "
                f"{self.kind.lower()} in {self.status.value} state"
            )

        self.status = new_status
        self.updated_at = datetime.now()

        # Empty values never erase what the gateway already told us
        self.gateway_transaction_id = gateway_transaction_id or self.gateway_transaction_id
        self.gateway_reference = gateway_reference or self.gateway_reference
        self.payment_method = payment_method or self.payment_method
        self.error_message = error_message or self.error_message

    def approve(self, gateway_transaction_id: str, gateway_reference: str) -> None:
        self.update_status(
            PurchaseStatus.APPROVED,
            gateway_transaction_id=gateway_transaction_id,
            gateway_reference=gateway_reference,
        )

    def decline(self, reason: str) -> None:
        self.update_status(PurchaseStatus.DECLINED, error_message=reason)

    def mark_as_error(self, reason: str) -> None:
        self.update_status(PurchaseStatus.ERROR, error_message=reason)

    def is_pending(self) -> bool:
        return self.status is PurchaseStatus.PENDING

    def is_approved(self) -> bool:
        return self.status is PurchaseStatus.APPROVED

    def is_declined(self) -> bool:
        return self.status is PurchaseStatus.DECLINED

    def is_error(self) -> bool:
        return self.status is PurchaseStatus.ERROR

    def is_final(self) -> bool:
        return self.status.is_final

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "amount": str(self.amount.amount),
            "currency": self.amount.currency,
            "status": self.status.value,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "address": self.address,
            "city": self.city,
            "postal_code": self.postal_code,
            "customer_email": self.customer_email,
            "gateway_transaction_id": self.gateway_transaction_id,
            "gateway_reference": self.gateway_reference,
            "payment_method": self.payment_method,
            "error_message": self.error_message,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


# ═══════════════════════════════════════════════════════════════════════════════
# Order / Transaction
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, kw_only=True)
class Order(Purchasable):
    """Checkout order with shipping address."""

    kind: ClassVar[str] = "Order"

    @property
    def total_price(self) -> Money:
        return self.amount


@dataclass(slots=True, kw_only=True)
class Transaction(Purchasable):
    """Direct payment transaction."""

    kind: ClassVar[str] = "Transaction"


__all__ = ("ShippingInfo", "Purchasable", "Order", "Transaction")

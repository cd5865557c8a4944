"""
Payment gateway port.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol

from storefront._types import Outcome

# ═══════════════════════════════════════════════════════════════════════════════
# Gateway Status
# ═══════════════════════════════════════════════════════════════════════════════


class GatewayStatus:
    """Status values reported by the gateway. Anything else is passed through."""

    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    PENDING = "PENDING"
    VOIDED = "VOIDED"
    ERROR = "ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# Request / Response
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PaymentMethod:
    type: str
    token: str | None = None
    installments: int | None = None


@dataclass(frozen=True, slots=True)
class PaymentRequest:
    """
    Payment submission.

    Note: reference is our purchase id, echoed back by the gateway.
    """

    amount: Decimal
    currency: str
    customer_email: str
    reference: str
    payment_method: PaymentMethod

    @property
    def amount_in_cents(self) -> int:
        return int((self.amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True)
class PaymentResponse:
    id: str
    status: str
    reference: str
    amount: Decimal
    currency: str
    payment_method: str
    created_at: datetime
    finalized_at: datetime | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Gateway Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class PaymentGateway(Protocol):
    """
    Card-payment processor.

    Implement this for a real provider (HTTP client, signatures, retries).
    Failures come back as Error(GatewayError) carrying the provider message.
    """

    async def process_payment(
        self, request: PaymentRequest
    ) -> Outcome[PaymentResponse]: ...

    async def get_transaction_status(
        self, gateway_transaction_id: str
    ) -> Outcome[PaymentResponse]: ...


__all__ = (
    "GatewayStatus",
    "PaymentMethod",
    "PaymentRequest",
    "PaymentResponse",
    "PaymentGateway",
)

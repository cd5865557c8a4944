"""
Purchase status.
"""

from __future__ import annotations

from enum import Enum


class PurchaseStatus(str, Enum):
    """
    Status of an Order or Transaction.

    Lifecycle:
        PENDING → APPROVED (terminal success)
                → DECLINED (terminal failure)
                → ERROR    (terminal failure)
                → VOIDED   (terminal, gateway-side only)
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    ERROR = "ERROR"
    VOIDED = "VOIDED"

    @property
    def is_final(self) -> bool:
        return self is not PurchaseStatus.PENDING

    def can_transition_to(self, new_status: PurchaseStatus) -> bool:
        """Only PENDING moves; every other status is terminal."""
        return self is PurchaseStatus.PENDING


__all__ = ("PurchaseStatus",)

"""
Simulated payment gateway — in-process PaymentGateway for demos and tests.
"""

from __future__ import annotations

import asyncio
import uuid
from collections import deque
from collections.abc import Iterable
from datetime import datetime

from kungfu import Ok, Error

from storefront._types import Outcome
from storefront.domain import GatewayError
from storefront.ports import GatewayStatus, PaymentRequest, PaymentResponse


class SimulatedGateway:
    """
    Answers every payment with a configured status.

    Example:
        gateway = SimulatedGateway()                              # always APPROVED
        gateway = SimulatedGateway(GatewayStatus.DECLINED)
        gateway = SimulatedGateway(statuses=["DECLINED", "APPROVED"])
        gateway = SimulatedGateway(fail_with="timeout")           # Error(GatewayError)

    Scripted statuses are consumed in order; once exhausted the default
    status is used. Every request is recorded in `requests`.
    """

    def __init__(
        self,
        status: str = GatewayStatus.APPROVED,
        *,
        statuses: Iterable[str] = (),
        fail_with: str | None = None,
        latency: float = 0.0,
        payment_method: str = "CARD",
    ) -> None:
        self._status = status
        self._script: deque[str] = deque(statuses)
        self._fail_with = fail_with
        self._latency = latency
        self._payment_method = payment_method
        self._responses: dict[str, PaymentResponse] = {}
        self.requests: list[PaymentRequest] = []

    async def process_payment(
        self, request: PaymentRequest
    ) -> Outcome[PaymentResponse]:
        self.requests.append(request)
        if self._latency:
            await asyncio.sleep(self._latency)

        if self._fail_with is not None:
            return Error(GatewayError(self._fail_with))

        status = self._script.popleft() if self._script else self._status
        now = datetime.now()
        response = PaymentResponse(
            id=f"sim_{uuid.uuid4().hex[:12]}",
            status=status,
            reference=request.reference,
            amount=request.amount,
            currency=request.currency,
            payment_method=request.payment_method.type or self._payment_method,
            created_at=now,
            finalized_at=None if status == GatewayStatus.PENDING else now,
        )
        self._responses[response.id] = response
        return Ok(response)

    async def get_transaction_status(
        self, gateway_transaction_id: str
    ) -> Outcome[PaymentResponse]:
        response = self._responses.get(gateway_transaction_id)
        if response is None:
            return Error(GatewayError(f"Unknown transaction {gateway_transaction_id}"))
        return Ok(response)


__all__ = ("SimulatedGateway",)

"""
Process payment — the purchase payment protocol.

    load ─▶ guard PENDING ─▶ gateway ─┬─ APPROVED/PENDING ─▶ commit sale
                                      ├─ DECLINED ─────────▶ decline
                                      └─ other ────────────▶ persist as-is

Commit sale: re-fetch product ─▶ decrease stock ─▶ persist product ─▶ approve ─▶ persist.

Stock is checked strictly after the gateway approves: a sale is never
committed without an approved payment, and never approved against stock
that vanished since the purchase was created.

Every failure after the guard marks the purchase ERROR and persists it
(best effort) before returning the failure. DECLINED is a business outcome
and returns Ok.
"""

from __future__ import annotations

from loguru import logger

from kungfu import Ok, Error

from storefront import lift as L
from storefront._types import Outcome
from storefront._config import Settings, get_settings
from storefront.domain import (
    GatewayError,
    InsufficientStockError,
    NotPendingError,
    Order,
    Purchasable,
    StorefrontError,
    Transaction,
)
from storefront.ports import (
    GatewayStatus,
    PaymentGateway,
    PaymentMethod,
    PaymentRequest,
    PaymentResponse,
    ProductRepository,
    PurchaseRepository,
)


class ProcessPayment[P: Purchasable]:
    """
    Charge a pending purchase and reconcile stock.

    Example:
        process = ProcessOrderPayment(orders, products, gateway)

        match await process.execute(order_id, PaymentMethod("CARD", token="tok_1")):
            case Ok(order):
                print(order.status)      # APPROVED, DECLINED or PENDING
            case Error(e):
                print(e.code, e.message)
    """

    def __init__(
        self,
        purchases: PurchaseRepository[P],
        products: ProductRepository,
        gateway: PaymentGateway,
        settings: Settings | None = None,
    ) -> None:
        self._purchases = purchases
        self._products = products
        self._gateway = gateway
        self._settings = settings or get_settings()

    async def execute(
        self,
        purchase_id: str,
        payment_method: PaymentMethod,
    ) -> Outcome[P]:
        match await self._purchases.find_by_id(purchase_id):
            case Ok(purchase):
                return await self._process(purchase, payment_method)
            case Error(e):
                logger.bind(purchase_id=purchase_id).warning("Purchase lookup failed: {}", e)
                return Error(e)

    # ───────────────────────────────────────────────────────────────────────────
    # Steps
    # ───────────────────────────────────────────────────────────────────────────

    async def _process(
        self,
        purchase: P,
        payment_method: PaymentMethod,
    ) -> Outcome[P]:
        log = logger.bind(purchase_id=purchase.id, kind=purchase.kind)

        if not purchase.is_pending():
            log.warning("Rejected: status is {}", purchase.status.value)
            return Error(NotPendingError(purchase.kind, purchase.id))

        request = PaymentRequest(
            amount=purchase.amount.amount,
            currency=purchase.amount.currency,
            customer_email=purchase.customer_email,
            reference=purchase.id,
            payment_method=payment_method,
        )

        match await self._submit(request):
            case Error(e):
                log.warning("Gateway call failed: {}", e)
                purchase.mark_as_error(str(e))
                await self._persist_best_effort(purchase)
                return Error(e)

            case Ok(response):
                purchase.payment_method = response.payment_method or payment_method.type
                return await self._settle(purchase, response)

    async def _submit(
        self, request: PaymentRequest
    ) -> Outcome[PaymentResponse]:
        timeout = self._settings.gateway_timeout_seconds

        def on_error(exc: Exception) -> StorefrontError:
            if isinstance(exc, TimeoutError) and not str(exc):
                return GatewayError(f"Payment gateway did not respond within {timeout}s")
            return GatewayError(str(exc) or type(exc).__name__)

        return await L.catching_result(
            L.with_timeout(lambda: self._gateway.process_payment(request), timeout),
            on_error=on_error,
        )

    async def _settle(
        self,
        purchase: P,
        response: PaymentResponse,
    ) -> Outcome[P]:
        log = logger.bind(purchase_id=purchase.id, kind=purchase.kind)

        match response.status:
            case GatewayStatus.APPROVED | GatewayStatus.PENDING:
                if response.status == GatewayStatus.PENDING:
                    # Async methods: stock is committed before the gateway finalizes
                    log.warning("Gateway reported PENDING; committing sale as approved")
                return await self._commit_sale(purchase, response)

            case GatewayStatus.DECLINED:
                purchase.decline(f"Payment was declined by {self._settings.gateway_name}")
                log.info("Payment declined")
                return await self._purchases.update(purchase)

            case _:
                log.warning("Unhandled gateway status {}; status left unchanged", response.status)
                return await self._purchases.update(purchase)

    async def _commit_sale(
        self,
        purchase: P,
        response: PaymentResponse,
    ) -> Outcome[P]:
        match await self._products.find_by_id(purchase.product_id):
            case Error(e):
                return await self._fail(purchase, "Product not found after payment approval", e)
            case Ok(product):
                pass

        try:
            product.decrease_stock(purchase.quantity)
        except InsufficientStockError as e:
            return await self._fail(purchase, f"Insufficient stock for {purchase.kind.lower()}", e)

        match await self._products.update(product):
            case Error(e):
                return await self._fail(purchase, "Failed to update product stock in database", e)
            case Ok(_):
                pass

        purchase.approve(response.id, response.reference)
        logger.bind(purchase_id=purchase.id, kind=purchase.kind).info(
            "Payment approved; stock of {} now {}", product.id, product.stock
        )
        return await self._purchases.update(purchase)

    # ───────────────────────────────────────────────────────────────────────────
    # Failure handling
    # ───────────────────────────────────────────────────────────────────────────

    async def _fail(
        self,
        purchase: P,
        reason: str,
        error: StorefrontError,
    ) -> Outcome[P]:
        logger.bind(purchase_id=purchase.id, kind=purchase.kind).warning(
            "{}: {}", reason, error
        )
        purchase.mark_as_error(reason)
        await self._persist_best_effort(purchase)
        return Error(error)

    async def _persist_best_effort(self, purchase: P) -> None:
        """Record the failure status; a write failure here is logged, not surfaced."""
        match await self._purchases.update(purchase):
            case Error(e):
                logger.bind(purchase_id=purchase.id, kind=purchase.kind).error(
                    "Could not persist {} status: {}", purchase.status.value, e
                )
            case Ok(_):
                pass


class ProcessOrderPayment(ProcessPayment[Order]):
    """Payment for a checkout Order."""


class ProcessTransactionPayment(ProcessPayment[Transaction]):
    """Payment for a direct Transaction."""


__all__ = ("ProcessPayment", "ProcessOrderPayment", "ProcessTransactionPayment")

"""Shared pytest fixtures for storefront tests."""

from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest
from kungfu import Error

from storefront import Settings
from storefront.adapters import (
    MemoryProductRepository,
    MemoryPurchaseRepository,
    SimulatedGateway,
)
from storefront.domain import (
    Money,
    Order,
    PersistenceError,
    Product,
    ShippingInfo,
    Transaction,
)
from storefront.ports import PaymentMethod


# ═══════════════════════════════════════════════════════════════════════════════
# Recording repositories
# ═══════════════════════════════════════════════════════════════════════════════


class SpyProductRepository(MemoryProductRepository):
    """Memory repository that records calls and can fail updates."""

    def __init__(self, products=None, *, fail_update: bool = False) -> None:
        super().__init__(products)
        self.calls: list[tuple[str, str]] = []
        self.fail_update = fail_update

    async def find_by_id(self, product_id):
        self.calls.append(("find_by_id", product_id))
        return await super().find_by_id(product_id)

    async def update(self, product):
        self.calls.append(("update", product.id))
        if self.fail_update:
            return Error(PersistenceError("database is locked"))
        return await super().update(product)


class SpyPurchaseRepository(MemoryPurchaseRepository):
    """Memory repository that records calls and can fail every update."""

    def __init__(self, purchase_type, *, fail_update: bool = False) -> None:
        super().__init__(purchase_type)
        self.calls: list[tuple[str, str]] = []
        self.updated: list = []
        self.fail_update = fail_update

    async def find_by_id(self, purchase_id):
        self.calls.append(("find_by_id", purchase_id))
        return await super().find_by_id(purchase_id)

    async def update(self, purchase):
        self.calls.append(("update", purchase.id))
        self.updated.append(purchase)
        if self.fail_update:
            return Error(PersistenceError("connection reset"))
        return await super().update(purchase)

    @property
    def writes(self) -> list[tuple[str, str]]:
        return [c for c in self.calls if c[0] != "find_by_id"]


# ═══════════════════════════════════════════════════════════════════════════════
# Misbehaving gateways
# ═══════════════════════════════════════════════════════════════════════════════


class RaisingGateway:
    """Gateway client that raises instead of returning a Result."""

    def __init__(self, message: str) -> None:
        self.message = message
        self.requests = []

    async def process_payment(self, request):
        self.requests.append(request)
        raise ConnectionError(self.message)

    async def get_transaction_status(self, gateway_transaction_id):
        raise ConnectionError(self.message)


class HangingGateway:
    """Gateway client that never answers."""

    def __init__(self) -> None:
        self.requests = []

    async def process_payment(self, request):
        self.requests.append(request)
        await asyncio.sleep(3600)

    async def get_transaction_status(self, gateway_transaction_id):
        await asyncio.sleep(3600)


# ═══════════════════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment's .env file."""
    return Settings(_env_file=None, gateway_name="Wompi", gateway_timeout_seconds=0.2)


@pytest.fixture
def coffee() -> Product:
    return Product(
        id="prod-coffee",
        name="Colombian Coffee",
        price=Money(Decimal("100000"), "COP"),
        stock=10,
        category="beverages",
    )


@pytest.fixture
def shipping() -> ShippingInfo:
    return ShippingInfo(
        first_name="Ana",
        last_name="Gomez",
        address="Calle 10 # 5-20",
        city="Bogota",
        postal_code="110111",
    )


@pytest.fixture
def card() -> PaymentMethod:
    return PaymentMethod(type="CARD", token="tok_test_4242", installments=1)


@pytest.fixture
def products(coffee: Product) -> SpyProductRepository:
    return SpyProductRepository([coffee])


@pytest.fixture
def orders() -> SpyPurchaseRepository:
    return SpyPurchaseRepository(Order)


@pytest.fixture
def transactions() -> SpyPurchaseRepository:
    return SpyPurchaseRepository(Transaction)


@pytest.fixture
def gateway() -> SimulatedGateway:
    return SimulatedGateway()


@pytest.fixture
def make_order(orders, coffee, shipping):
    """Save a PENDING order for `coffee` and reset the call log."""

    async def _make(quantity: int = 2, product: Product | None = None) -> Order:
        product = product or coffee
        order = Order.create(
            product_id=product.id,
            quantity=quantity,
            amount=product.calculate_total_price(quantity),
            shipping=shipping,
            customer_email="ana@example.com",
        )
        await orders.save(order)
        orders.calls.clear()
        return order

    return _make

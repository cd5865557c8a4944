"""Tests for opening a PENDING order or transaction."""

from decimal import Decimal

import pytest
from kungfu import Error, Ok

from storefront.domain import (
    InsufficientStockError,
    InvalidQuantityError,
    Money,
    Order,
    ProductNotFoundError,
    PurchaseStatus,
    Transaction,
)
from storefront.payments import CreateOrder, CreateTransaction


class TestCreateOrder:
    async def test_creates_pending_order_with_frozen_total(self, orders, products, shipping):
        result = await CreateOrder(orders, products).execute("prod-coffee", 2, shipping, "ana@example.com")

        assert isinstance(result, Ok)
        order = result.value
        assert isinstance(order, Order)
        assert order.status is PurchaseStatus.PENDING
        assert order.amount == Money(Decimal("200000"), "COP")
        assert order.shipping == shipping

        stored = await orders.find_by_id(order.id)
        assert isinstance(stored, Ok)
        assert stored.value.id == order.id

    async def test_does_not_reserve_stock(self, orders, products, shipping):
        await CreateOrder(orders, products).execute("prod-coffee", 4, shipping, "ana@example.com")

        product = await products.find_by_id("prod-coffee")
        assert product.value.stock == 10

    async def test_unknown_product(self, orders, products, shipping):
        result = await CreateOrder(orders, products).execute("nope", 1, shipping, "ana@example.com")

        assert isinstance(result, Error)
        assert isinstance(result.value, ProductNotFoundError)
        assert (await orders.find_all()).value == []

    async def test_insufficient_stock(self, orders, products, shipping):
        result = await CreateOrder(orders, products).execute("prod-coffee", 11, shipping, "ana@example.com")

        assert isinstance(result, Error)
        assert isinstance(result.value, InsufficientStockError)
        assert result.value.message == "Insufficient stock. Available: 10, Requested: 11"

    @pytest.mark.parametrize("quantity", [0, -1, True, 1.5])
    async def test_invalid_quantity_rejected_before_lookup(self, orders, products, shipping, quantity):
        result = await CreateOrder(orders, products).execute("prod-coffee", quantity, shipping, "ana@example.com")

        assert isinstance(result, Error)
        assert isinstance(result.value, InvalidQuantityError)
        assert result.value.code == "INVALID_QUANTITY"
        assert products.calls == []


class TestCreateTransaction:
    async def test_creates_transaction(self, transactions, products, shipping):
        result = await CreateTransaction(transactions, products).execute(
            "prod-coffee", 1, shipping, "ana@example.com"
        )

        assert isinstance(result, Ok)
        assert isinstance(result.value, Transaction)
        assert result.value.amount == Money(Decimal("100000"))

"""
Wiring — the composition root.

Every use case receives its collaborators through its constructor;
Storefront just builds them once from a set of ports.

    shop = Storefront.in_memory(SimulatedGateway(), products=[coffee])

    match await shop.create_order.execute(coffee.id, 2, shipping, email):
        case Ok(order):
            await shop.process_order_payment.execute(order.id, PaymentMethod("CARD"))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront._config import Settings, get_settings
from storefront.adapters import (
    MemoryProductRepository,
    MemoryPurchaseRepository,
    OrderTable,
    SQLAlchemyProductRepository,
    SQLAlchemyPurchaseRepository,
    TransactionTable,
)
from storefront.domain import Order, Product, Transaction
from storefront.payments import (
    CreateOrder,
    CreateTransaction,
    GetOrder,
    GetProductById,
    GetProducts,
    GetTransaction,
    ProcessOrderPayment,
    ProcessTransactionPayment,
)
from storefront.ports import PaymentGateway, ProductRepository, PurchaseRepository


@dataclass(frozen=True, slots=True)
class Storefront:
    settings: Settings
    products: ProductRepository
    orders: PurchaseRepository[Order]
    transactions: PurchaseRepository[Transaction]
    gateway: PaymentGateway

    get_products: GetProducts
    get_product: GetProductById
    get_order: GetOrder
    get_transaction: GetTransaction
    create_order: CreateOrder
    create_transaction: CreateTransaction
    process_order_payment: ProcessOrderPayment
    process_transaction_payment: ProcessTransactionPayment

    @classmethod
    def in_memory(
        cls,
        gateway: PaymentGateway,
        settings: Settings | None = None,
        products: Iterable[Product] = (),
    ) -> Storefront:
        return build_storefront(
            MemoryProductRepository(list(products)),
            MemoryPurchaseRepository(Order),
            MemoryPurchaseRepository(Transaction),
            gateway,
            settings,
        )

    @classmethod
    def with_sqlalchemy(
        cls,
        session_factory: async_sessionmaker[AsyncSession],
        gateway: PaymentGateway,
        settings: Settings | None = None,
    ) -> Storefront:
        return build_storefront(
            SQLAlchemyProductRepository(session_factory),
            SQLAlchemyPurchaseRepository(session_factory, Order, OrderTable),
            SQLAlchemyPurchaseRepository(session_factory, Transaction, TransactionTable),
            gateway,
            settings,
        )


def build_storefront(
    products: ProductRepository,
    orders: PurchaseRepository[Order],
    transactions: PurchaseRepository[Transaction],
    gateway: PaymentGateway,
    settings: Settings | None = None,
) -> Storefront:
    settings = settings or get_settings()
    return Storefront(
        settings=settings,
        products=products,
        orders=orders,
        transactions=transactions,
        gateway=gateway,
        get_products=GetProducts(products),
        get_product=GetProductById(products),
        get_order=GetOrder(orders),
        get_transaction=GetTransaction(transactions),
        create_order=CreateOrder(orders, products),
        create_transaction=CreateTransaction(transactions, products),
        process_order_payment=ProcessOrderPayment(orders, products, gateway, settings),
        process_transaction_payment=ProcessTransactionPayment(
            transactions, products, gateway, settings
        ),
    )


__all__ = ("Storefront", "build_storefront")

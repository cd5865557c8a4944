"""
SQLAlchemy repositories — async persistence for products and purchases.

Usage:
    session_factory, engine = await create_database("sqlite+aiosqlite:///shop.db")

    products = SQLAlchemyProductRepository(session_factory)
    orders = SQLAlchemyPurchaseRepository(session_factory, Order, OrderTable)

Note: money is stored as integer cents plus a currency code, so no Decimal
ever reaches the driver.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, cast

from sqlalchemy import DateTime, Integer, String, Text, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

from kungfu import Ok, Error

from storefront._types import Outcome
from storefront.domain import (
    Money,
    PersistenceError,
    Product,
    ProductNotFoundError,
    Purchasable,
    PurchaseNotFoundError,
    PurchaseStatus,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Base
# ═══════════════════════════════════════════════════════════════════════════════


class Base(DeclarativeBase):
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Tables
# ═══════════════════════════════════════════════════════════════════════════════


class ProductTable(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="COP")
    stock: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class PurchaseColumnsMixin:
    """
    Columns shared by orders and transactions.

    Adds: product reference, frozen charge (amount_cents + currency),
    shipping address, status and gateway metadata, timestamps.
    """

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    product_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    # Charge
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="COP")

    # Shipping
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)

    # Payment
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    gateway_transaction_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    gateway_reference: Mapped[str | None] = mapped_column(String(100), nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class OrderTable(Base, PurchaseColumnsMixin):
    __tablename__ = "orders"


class TransactionTable(Base, PurchaseColumnsMixin):
    __tablename__ = "transactions"


# ═══════════════════════════════════════════════════════════════════════════════
# Row <-> Domain
# ═══════════════════════════════════════════════════════════════════════════════


def _product_from_row(row: ProductTable) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        price=Money.from_cents(row.price_cents, row.currency),
        stock=row.stock,
        category=row.category,
        description=row.description,
        image_url=row.image_url,
        created_at=row.created_at,
        version=row.version,
    )


def _apply_product(row: ProductTable, product: Product) -> None:
    row.name = product.name
    row.price_cents = product.price.to_cents()
    row.currency = product.price.currency
    row.stock = product.stock
    row.category = product.category
    row.description = product.description
    row.image_url = product.image_url
    row.created_at = product.created_at
    row.version = product.version


def _purchase_from_row[P: Purchasable](
    row: PurchaseColumnsMixin, purchase_type: type[P]
) -> P:
    return purchase_type(
        id=row.id,
        product_id=row.product_id,
        quantity=row.quantity,
        amount=Money.from_cents(row.amount_cents, row.currency),
        first_name=row.first_name,
        last_name=row.last_name,
        address=row.address,
        city=row.city,
        postal_code=row.postal_code,
        customer_email=row.customer_email,
        status=PurchaseStatus(row.status),
        gateway_transaction_id=row.gateway_transaction_id,
        gateway_reference=row.gateway_reference,
        payment_method=row.payment_method,
        error_message=row.error_message,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply_purchase(row: PurchaseColumnsMixin, purchase: Purchasable) -> None:
    row.product_id = purchase.product_id
    row.quantity = purchase.quantity
    row.amount_cents = purchase.amount.to_cents()
    row.currency = purchase.amount.currency
    row.first_name = purchase.first_name
    row.last_name = purchase.last_name
    row.address = purchase.address
    row.city = purchase.city
    row.postal_code = purchase.postal_code
    row.customer_email = purchase.customer_email
    row.status = purchase.status.value
    row.gateway_transaction_id = purchase.gateway_transaction_id
    row.gateway_reference = purchase.gateway_reference
    row.payment_method = purchase.payment_method
    row.error_message = purchase.error_message
    row.created_at = purchase.created_at
    row.updated_at = purchase.updated_at


# ═══════════════════════════════════════════════════════════════════════════════
# Repositories
# ═══════════════════════════════════════════════════════════════════════════════


class SQLAlchemyProductRepository:
    """
    ProductRepository over an async session factory.

    Note: update() is a conditional UPDATE on the stored version. Two
    checkouts that loaded the same product cannot both write it back: the
    second matches no row and gets Error(PersistenceError).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_all(self) -> Outcome[list[Product]]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(ProductTable).order_by(ProductTable.name))
                return Ok([_product_from_row(row) for row in result.scalars()])

        except Exception as e:
            return Error(PersistenceError(f"Failed to list products: {e}", e))

    async def find_by_id(self, product_id: str) -> Outcome[Product]:
        try:
            async with self._session_factory() as session:
                row = await session.get(ProductTable, product_id)
                if row is None:
                    return Error(ProductNotFoundError(product_id))
                return Ok(_product_from_row(row))

        except Exception as e:
            return Error(PersistenceError(f"Failed to get product: {e}", e))

    async def save(self, product: Product) -> Outcome[Product]:
        try:
            async with self._session_factory() as session:
                row = await session.get(ProductTable, product.id)
                if row is None:
                    row = ProductTable(id=product.id)
                    session.add(row)
                _apply_product(row, product)
                await session.commit()
                return Ok(product)

        except Exception as e:
            return Error(PersistenceError(f"Failed to save product: {e}", e))

    async def update(self, product: Product) -> Outcome[Product]:
        try:
            async with self._session_factory() as session:
                stmt = (
                    update(ProductTable)
                    .where(
                        ProductTable.id == product.id,
                        ProductTable.version == product.version,
                    )
                    .values(
                        name=product.name,
                        price_cents=product.price.to_cents(),
                        currency=product.price.currency,
                        stock=product.stock,
                        category=product.category,
                        description=product.description,
                        image_url=product.image_url,
                        version=product.version + 1,
                    )
                )
                cursor = cast(CursorResult[Any], await session.execute(stmt))
                await session.commit()

                if cursor.rowcount == 0:
                    if await session.get(ProductTable, product.id) is None:
                        return Error(ProductNotFoundError(product.id))
                    return Error(PersistenceError(f"Product {product.id} was modified concurrently"))

                product.version += 1
                return Ok(product)

        except Exception as e:
            return Error(PersistenceError(f"Failed to update product: {e}", e))

    async def delete(self, product_id: str) -> Outcome[None]:
        try:
            async with self._session_factory() as session:
                row = await session.get(ProductTable, product_id)
                if row is None:
                    return Error(ProductNotFoundError(product_id))
                await session.delete(row)
                await session.commit()
                return Ok(None)

        except Exception as e:
            return Error(PersistenceError(f"Failed to delete product: {e}", e))


class SQLAlchemyPurchaseRepository[P: Purchasable]:
    """
    PurchaseRepository for one purchase type and its table.

    Example:
        orders = SQLAlchemyPurchaseRepository(session_factory, Order, OrderTable)
        transactions = SQLAlchemyPurchaseRepository(
            session_factory, Transaction, TransactionTable
        )
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        purchase_type: type[P],
        table: type[OrderTable] | type[TransactionTable],
    ) -> None:
        self._session_factory = session_factory
        self._purchase_type = purchase_type
        self._table = table

    async def find_all(self) -> Outcome[list[P]]:
        try:
            async with self._session_factory() as session:
                stmt = select(self._table).order_by(self._table.created_at)
                result = await session.execute(stmt)
                return Ok([self._to_domain(row) for row in result.scalars()])

        except Exception as e:
            return Error(PersistenceError(f"Failed to list {self._plural}: {e}", e))

    async def find_by_id(self, purchase_id: str) -> Outcome[P]:
        try:
            async with self._session_factory() as session:
                row = await session.get(self._table, purchase_id)
                if row is None:
                    return Error(PurchaseNotFoundError(self._purchase_type.kind, purchase_id))
                return Ok(self._to_domain(row))

        except Exception as e:
            return Error(PersistenceError(f"Failed to get {self._singular}: {e}", e))

    async def find_by_status(
        self, status: PurchaseStatus
    ) -> Outcome[list[P]]:
        try:
            async with self._session_factory() as session:
                stmt = (
                    select(self._table)
                    .where(self._table.status == status.value)
                    .order_by(self._table.created_at)
                )
                result = await session.execute(stmt)
                return Ok([self._to_domain(row) for row in result.scalars()])

        except Exception as e:
            return Error(PersistenceError(f"Failed to list {self._plural}: {e}", e))

    async def save(self, purchase: P) -> Outcome[P]:
        try:
            async with self._session_factory() as session:
                row = self._table(id=purchase.id)
                _apply_purchase(row, purchase)
                session.add(row)
                await session.commit()
                return Ok(purchase)

        except Exception as e:
            return Error(PersistenceError(f"Failed to save {self._singular}: {e}", e))

    async def update(self, purchase: P) -> Outcome[P]:
        try:
            async with self._session_factory() as session:
                row = await session.get(self._table, purchase.id)
                if row is None:
                    return Error(PurchaseNotFoundError(self._purchase_type.kind, purchase.id))
                _apply_purchase(row, purchase)
                await session.commit()
                return Ok(purchase)

        except Exception as e:
            return Error(PersistenceError(f"Failed to update {self._singular}: {e}", e))

    def _to_domain(self, row: OrderTable | TransactionTable) -> P:
        return _purchase_from_row(row, self._purchase_type)

    @property
    def _singular(self) -> str:
        return self._purchase_type.kind.lower()

    @property
    def _plural(self) -> str:
        return f"{self._singular}s"


# ═══════════════════════════════════════════════════════════════════════════════
# Database Setup
# ═══════════════════════════════════════════════════════════════════════════════


async def create_database(
    url: str = "sqlite+aiosqlite:///:memory:",
) -> tuple[async_sessionmaker[AsyncSession], AsyncEngine]:
    """Create tables and return (session_factory, engine)."""
    if url.endswith(":memory:"):
        # One shared connection, otherwise each session sees an empty database
        engine = create_async_engine(url, echo=False, poolclass=StaticPool)
    else:
        engine = create_async_engine(url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    return async_sessionmaker(engine, expire_on_commit=False), engine


__all__ = (
    "Base",
    "ProductTable",
    "PurchaseColumnsMixin",
    "OrderTable",
    "TransactionTable",
    "SQLAlchemyProductRepository",
    "SQLAlchemyPurchaseRepository",
    "create_database",
)

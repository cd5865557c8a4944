"""
Adapters — concrete ports.

    from storefront import adapters as A

    products = A.MemoryProductRepository([coffee])
    orders = A.MemoryPurchaseRepository(Order)
    gateway = A.SimulatedGateway()
"""

from storefront.adapters._memory import MemoryProductRepository, MemoryPurchaseRepository
from storefront.adapters._sqlalchemy import (
    Base,
    ProductTable,
    PurchaseColumnsMixin,
    OrderTable,
    TransactionTable,
    SQLAlchemyProductRepository,
    SQLAlchemyPurchaseRepository,
    create_database,
)
from storefront.adapters._gateway import SimulatedGateway

__all__ = (
    # Memory
    "MemoryProductRepository",
    "MemoryPurchaseRepository",
    # SQLAlchemy
    "Base",
    "ProductTable",
    "PurchaseColumnsMixin",
    "OrderTable",
    "TransactionTable",
    "SQLAlchemyProductRepository",
    "SQLAlchemyPurchaseRepository",
    "create_database",
    # Gateway
    "SimulatedGateway",
)

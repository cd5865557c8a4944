"""
Ports — contracts the use cases depend on.

    from storefront import ports as P

    class MyGateway(P.PaymentGateway): ...
"""

from storefront.ports._repository import ProductRepository, PurchaseRepository
from storefront.ports._gateway import (
    GatewayStatus,
    PaymentMethod,
    PaymentRequest,
    PaymentResponse,
    PaymentGateway,
)

__all__ = (
    "ProductRepository",
    "PurchaseRepository",
    "GatewayStatus",
    "PaymentMethod",
    "PaymentRequest",
    "PaymentResponse",
    "PaymentGateway",
)

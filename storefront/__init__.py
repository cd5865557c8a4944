"""
storefront — payment core for a single-product checkout.

    from storefront import domain as D      # Money, Product, Order, Transaction
    from storefront import ports as P       # repository + gateway contracts
    from storefront import payments as Pay  # use cases
    from storefront import adapters as A    # memory, SQLAlchemy, simulated gateway
"""

from storefront import lift
from storefront import domain
from storefront import ports
from storefront import payments
from storefront import adapters
from storefront._types import (
    Result,
    Ok,
    Error,
    LazyCoroResult,
    Outcome,
)
from storefront._config import Settings, get_settings
from storefront._logging import configure_logging
from storefront._wiring import Storefront, build_storefront

__version__ = "0.1.0"

__all__ = (
    "lift",
    "domain",
    "ports",
    "payments",
    "adapters",
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    "Outcome",
    "Settings",
    "get_settings",
    "configure_logging",
    "Storefront",
    "build_storefront",
)

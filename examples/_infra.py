"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from decimal import Decimal

from kungfu import Ok, Error

from storefront import Outcome, configure_logging, get_settings
from storefront.domain import Money, Product, ShippingInfo
from storefront.ports import PaymentMethod


# Catalog
def catalog() -> list[Product]:
    currency = get_settings().default_currency
    return [
        Product("coffee", "Colombian Coffee 500g", Money(Decimal("100000"), currency), stock=10, category="beverages"),
        Product("mug", "Ceramic Mug", Money(Decimal("35000"), currency), stock=1, category="kitchen"),
    ]


SHIPPING = ShippingInfo(
    first_name="Ana",
    last_name="Gomez",
    address="Calle 10 # 5-20",
    city="Bogota",
    postal_code="110111",
)

CARD = PaymentMethod(type="CARD", token="tok_test_4242", installments=1)


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def show[T](label: str, result: Outcome[T]) -> None:
    match result:
        case Ok(value):
            status = getattr(value, "status", None)
            print(f"   {label}: ok {status.value if status else value}")
        case Error(e):
            print(f"   {label}: {e.code} ({e.message})")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    configure_logging()
    asyncio.run(main())

"""Tests for the Money value object."""

from decimal import Decimal

import pytest

from storefront.domain import Money


class TestMoney:
    def test_amount_is_quantized_to_cents(self):
        assert Money(Decimal("10.005")).amount == Decimal("10.01")
        assert Money(Decimal("100000")).amount == Decimal("100000.00")

    def test_default_currency_is_cop(self):
        assert Money(Decimal("1")).currency == "COP"

    def test_currency_is_upper_cased(self):
        assert Money(Decimal("1"), "usd").currency == "USD"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            Money(Decimal("-0.01"))

    def test_multiply_keeps_currency(self):
        total = Money(Decimal("100000"), "COP").multiply(2)
        assert total == Money(Decimal("200000"), "COP")

    def test_add(self):
        assert Money(Decimal("1.50")).add(Money(Decimal("2.25"))) == Money(Decimal("3.75"))

    def test_add_rejects_currency_mismatch(self):
        with pytest.raises(ValueError, match="different currencies"):
            Money(Decimal("1"), "COP").add(Money(Decimal("1"), "USD"))

    def test_cents_conversion(self):
        money = Money.from_cents(1999, "USD")
        assert money == Money(Decimal("19.99"), "USD")
        assert money.to_cents() == 1999

    def test_equality_is_by_value(self):
        assert Money(Decimal("5")) == Money(Decimal("5.00"))
        assert Money(Decimal("5"), "COP") != Money(Decimal("5"), "USD")

    def test_str(self):
        assert str(Money(Decimal("12.5"), "COP")) == "12.50 COP"

    def test_immutable(self):
        money = Money(Decimal("1"))
        with pytest.raises(AttributeError):
            money.amount = Decimal("2")

"""Tests for the simulated payment gateway."""

from decimal import Decimal

from kungfu import Error, Ok

from storefront.adapters import SimulatedGateway
from storefront.domain import GatewayError
from storefront.ports import GatewayStatus, PaymentMethod, PaymentRequest


def make_request(reference: str = "order-1") -> PaymentRequest:
    return PaymentRequest(
        amount=Decimal("200000.00"),
        currency="COP",
        customer_email="ana@example.com",
        reference=reference,
        payment_method=PaymentMethod("NEQUI"),
    )


async def test_approves_by_default():
    gateway = SimulatedGateway()

    result = await gateway.process_payment(make_request())

    assert isinstance(result, Ok)
    response = result.value
    assert response.status == GatewayStatus.APPROVED
    assert response.reference == "order-1"
    assert response.amount == Decimal("200000.00")
    assert response.payment_method == "NEQUI"
    assert response.finalized_at is not None


async def test_scripted_statuses_then_default():
    gateway = SimulatedGateway(GatewayStatus.APPROVED, statuses=["DECLINED", "PENDING"])

    statuses = [(await gateway.process_payment(make_request())).value.status for _ in range(3)]

    assert statuses == ["DECLINED", "PENDING", "APPROVED"]
    assert len(gateway.requests) == 3


async def test_fail_with_message():
    result = await SimulatedGateway(fail_with="timeout").process_payment(make_request())

    assert isinstance(result, Error)
    assert isinstance(result.value, GatewayError)
    assert result.value.code == "PAYMENT_GATEWAY_ERROR"
    assert str(result.value) == "timeout"


async def test_transaction_status_lookup():
    gateway = SimulatedGateway(GatewayStatus.PENDING)
    response = (await gateway.process_payment(make_request())).value

    found = await gateway.get_transaction_status(response.id)
    missing = await gateway.get_transaction_status("nope")

    assert isinstance(found, Ok)
    assert found.value == response
    assert found.value.finalized_at is None
    assert isinstance(missing, Error)


def test_amount_in_cents():
    assert make_request().amount_in_cents == 20000000

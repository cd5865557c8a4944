"""
Checkout Example — orders against in-memory storage

Run: python -m examples.checkout_example
"""

from combinators import batch, lift as L
from kungfu import Ok

from storefront import Storefront
from storefront.adapters import SimulatedGateway
from storefront.ports import GatewayStatus

from examples._infra import CARD, SHIPPING, banner, catalog, run, show


async def main() -> None:
    banner("Checkout")

    gateway = SimulatedGateway(statuses=[GatewayStatus.APPROVED, GatewayStatus.DECLINED])
    shop = Storefront.in_memory(gateway, products=catalog())

    # 1. Approved: stock 10 → 8
    print("1. Approved payment:")
    created = await shop.create_order.execute("coffee", 2, SHIPPING, "ana@example.com")
    match created:
        case Ok(order):
            print(f"   Order {order.id[:8]} total {order.total_price}")
            show("pay", await shop.process_order_payment.execute(order.id, CARD))
    print(f"   coffee stock: {(await shop.get_product.execute('coffee')).value.stock}\n")

    # 2. Declined: business outcome, not a failure
    print("2. Declined payment:")
    order = (await shop.create_order.execute("coffee", 1, SHIPPING, "ana@example.com")).value
    show("pay", await shop.process_order_payment.execute(order.id, CARD))

    # 3. Paying twice is rejected by the PENDING guard
    print("\n3. Second attempt on a settled order:")
    show("pay", await shop.process_order_payment.execute(order.id, CARD))

    # 4. Two buyers race for the last mug
    print("\n4. Last mug, two buyers:")
    first = (await shop.create_order.execute("mug", 1, SHIPPING, "ana@example.com")).value
    second = (await shop.create_order.execute("mug", 1, SHIPPING, "luis@example.com")).value
    show("first", await shop.process_order_payment.execute(first.id, CARD))
    show("second", await shop.process_order_payment.execute(second.id, CARD))

    # 5. Gateway down
    print("\n5. Gateway failure:")
    down = Storefront.in_memory(SimulatedGateway(fail_with="timeout"), products=catalog())
    order = (await down.create_order.execute("coffee", 1, SHIPPING, "ana@example.com")).value
    show("pay", await down.process_order_payment.execute(order.id, CARD))
    show("stored", await down.get_order.execute(order.id))

    # 6. Independent purchases in parallel (combinators.batch)
    print("\n6. Five independent orders in parallel:")
    busy = Storefront.in_memory(SimulatedGateway(latency=0.05), products=catalog())
    orders = [
        (await busy.create_order.execute("coffee", 1, SHIPPING, f"buyer{i}@example.com")).value
        for i in range(5)
    ]
    await batch(
        orders,
        handler=lambda o: L.catching_async(
            lambda: busy.process_order_payment.execute(o.id, CARD),
            on_error=str,
        ),
        concurrency=5,
    )
    print(f"   gateway calls: {len(busy.gateway.requests)}")


if __name__ == "__main__":
    run(main)

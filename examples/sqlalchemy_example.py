"""
SQLAlchemy Example — the same checkout on a database

Run: python -m examples.sqlalchemy_example
"""

from kungfu import Ok, Error

from storefront import Storefront, get_settings
from storefront.adapters import SimulatedGateway, create_database
from storefront.domain import PurchaseStatus
from storefront.ports import GatewayStatus

from examples._infra import CARD, SHIPPING, banner, catalog, run, show


async def main() -> None:
    banner("Checkout on SQLAlchemy")

    settings = get_settings()
    session_factory, engine = await create_database(settings.database_url)
    gateway = SimulatedGateway(statuses=[GatewayStatus.APPROVED, GatewayStatus.VOIDED])
    shop = Storefront.with_sqlalchemy(session_factory, gateway, settings)

    try:
        for product in catalog():
            await shop.products.save(product)

        # 1. Order approved and stock committed
        print("1. Order:")
        match await shop.create_order.execute("coffee", 3, SHIPPING, "ana@example.com"):
            case Ok(order):
                show("pay", await shop.process_order_payment.execute(order.id, CARD))
            case Error(e):
                print(f"   create failed: {e}")

        # 2. Unknown gateway status: stored as-is
        print("\n2. Transaction with a VOIDED gateway answer:")
        tx = (await shop.create_transaction.execute("mug", 1, SHIPPING, "luis@example.com")).value
        show("pay", await shop.process_transaction_payment.execute(tx.id, CARD))

        # 3. What the database holds now
        print("\n3. Stored state:")
        for product in (await shop.get_products.execute()).value:
            print(f"   {product.name}: stock {product.stock}")
        approved = (await shop.orders.find_by_status(PurchaseStatus.APPROVED)).value
        pending = (await shop.transactions.find_by_status(PurchaseStatus.PENDING)).value
        print(f"   approved orders: {len(approved)}, pending transactions: {len(pending)}")

    finally:
        await engine.dispose()


if __name__ == "__main__":
    run(main)

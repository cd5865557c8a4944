"""Tests for the in-memory repositories."""

from kungfu import Error, Ok

from storefront.adapters import MemoryProductRepository, MemoryPurchaseRepository
from storefront.domain import (
    Order,
    PersistenceError,
    ProductNotFoundError,
    PurchaseNotFoundError,
    PurchaseStatus,
)


class TestMemoryProductRepository:
    async def test_unpersisted_mutation_does_not_leak(self, coffee):
        repo = MemoryProductRepository([coffee])

        loaded = (await repo.find_by_id(coffee.id)).value
        loaded.decrease_stock(3)

        assert (await repo.find_by_id(coffee.id)).value.stock == 10

    async def test_update_and_delete(self, coffee):
        repo = MemoryProductRepository()
        await repo.save(coffee)

        coffee.decrease_stock(1)
        assert isinstance(await repo.update(coffee), Ok)
        assert (await repo.find_by_id(coffee.id)).value.stock == 9

        assert isinstance(await repo.delete(coffee.id), Ok)
        missing = await repo.find_by_id(coffee.id)
        assert isinstance(missing, Error)
        assert isinstance(missing.value, ProductNotFoundError)

    async def test_update_missing(self, coffee):
        result = await MemoryProductRepository().update(coffee)
        assert isinstance(result, Error)
        assert result.value.code == "PRODUCT_NOT_FOUND"

    async def test_stale_update_is_rejected(self, coffee):
        repo = MemoryProductRepository([coffee])
        first = (await repo.find_by_id(coffee.id)).value
        second = (await repo.find_by_id(coffee.id)).value

        first.decrease_stock(1)
        assert isinstance(await repo.update(first), Ok)
        second.decrease_stock(1)
        result = await repo.update(second)

        assert isinstance(result, Error)
        assert isinstance(result.value, PersistenceError)
        stored = (await repo.find_by_id(coffee.id)).value
        assert stored.stock == 9
        assert stored.version == 1


class TestMemoryPurchaseRepository:
    async def test_find_by_status(self, make_order, orders):
        first = await make_order()
        second = await make_order()
        second.approve("gw-1", "ref")
        await orders.update(second)

        pending = (await orders.find_by_status(PurchaseStatus.PENDING)).value
        approved = (await orders.find_by_status(PurchaseStatus.APPROVED)).value

        assert [o.id for o in pending] == [first.id]
        assert [o.id for o in approved] == [second.id]

    async def test_update_missing_is_kind_aware(self, make_order):
        order = await make_order()
        repo = MemoryPurchaseRepository(Order)

        result = await repo.update(order)

        assert isinstance(result, Error)
        assert isinstance(result.value, PurchaseNotFoundError)
        assert result.value.code == "ORDER_NOT_FOUND"

"""Registry Service - check -> persist -> commit orchestration and hydration.

Invariants:
    - successful creations land in both the database and memory
    - rejected records never reach the database
    - a database failure leaves memory unchanged
    - hydrate() restores state without re-emitting notifications
"""

from datetime import datetime, timezone

import pytest

from app.core.errors import (
    DatabaseError, DuplicateEntityError, UnknownReceiverError, UnknownCustomerError,
)
from app.core.registry import Registry
from app.services.registry_service import RegistryService

from tests.services.registry_fakes import FIXED_NOW, RecordingSink


async def _seed(service: RegistryService) -> None:
    await service.create_driver("Dan", "CAR-9")
    await service.create_customer("Eve", "1 Rd", "555-0200")
    await service.create_order(1, FIXED_NOW, "high", "Eve", "1 Rd")
    await service.create_shipment(100, "Dan", ["Eve"], "X", "Y", "TRK1", 50)


async def test_creations_persist_and_commit(service, store, sink):
    await _seed(service)

    assert len(await store.load_all()) == 4
    assert len(service.registry.shipments()) == 1
    assert [e["entity_kind"] for e in sink.events] == [
        "driver", "customer", "order", "shipment",
    ]


async def test_shipment_stamped_by_registry_clock(service):
    await service.create_driver("Dan", "CAR-9")
    shipment = await service.create_shipment(1, "Dan", [], "X", "Y", "T", 0)
    assert shipment.created_at == FIXED_NOW
    assert shipment.updated_at == FIXED_NOW


async def test_rejected_record_not_persisted(service, store):
    await service.create_driver("Dan", "CAR-9")
    with pytest.raises(DuplicateEntityError):
        await service.create_driver("Dan", "CAR-10")
    with pytest.raises(UnknownCustomerError):
        await service.create_order(2, FIXED_NOW, "low", "Carol", "9 Ave")
    with pytest.raises(UnknownReceiverError):
        await service.create_shipment(101, "Dan", ["Frank"], "X", "Y", "T", 1)

    assert len(await store.load_all()) == 1


class _FailingStore:
    async def save(self, record):
        raise DatabaseError("connection reset", "commit")

    async def load_all(self):
        return []


async def test_database_failure_leaves_memory_unchanged():
    sink = RecordingSink()
    service = RegistryService(Registry(sink=sink), _FailingStore())
    with pytest.raises(DatabaseError):
        await service.create_driver("Dan", "CAR-9")
    assert service.registry.drivers() == ()
    assert not service.registry.driver_exists("Dan")
    assert sink.events == []


async def test_hydrate_restores_state_silently(service, store):
    await _seed(service)

    sink = RecordingSink()
    fresh = RegistryService(Registry(sink=sink), store)
    restored = await fresh.hydrate()

    assert restored == 4
    assert fresh.registry.drivers() == service.registry.drivers()
    assert fresh.registry.customers() == service.registry.customers()
    assert fresh.registry.orders() == service.registry.orders()
    assert fresh.registry.shipments() == service.registry.shipments()
    assert sink.events == []
    with pytest.raises(DuplicateEntityError):
        await fresh.create_customer("Eve", "elsewhere", "000")


async def test_hydrate_without_store_is_noop():
    service = RegistryService(Registry())
    assert await service.hydrate() == 0


async def test_in_memory_service_without_store():
    service = RegistryService(Registry())
    driver = await service.create_driver("Alice", "CAR-1")
    assert service.registry.drivers() == (driver,)


async def test_naive_order_date_survives_hydrate(service, store):
    await service.create_customer("Bob", "123 St", "555-0100")
    order = await service.create_order(
        3, datetime(2026, 1, 1, 12, 0), "high", "Bob", "123 St",
    )
    assert order.order_date == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    fresh = RegistryService(Registry(), store)
    await fresh.hydrate()
    assert fresh.registry.orders() == service.registry.orders()
    assert fresh.registry.orders()[0].order_date.isoformat() == (
        "2026-01-01T12:00:00+00:00"
    )

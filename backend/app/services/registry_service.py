"""Registry Service - async shell that persists a record before committing it to memory.

Invariants:
    - One creation at a time per process (asyncio.Lock): check -> save -> commit
    - A rejected record never reaches the database
    - A database failure leaves the in-memory registry unchanged
    - hydrate() replays stored records through the core validation, without notifications

Design Decisions:
    - Module-level registry_service singleton mirrors db_manager: initialized in the
      FastAPI lifespan, exposed to routes through get_registry_service
    - store is optional: without one the service runs purely in memory (tests, dev)
"""

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime

from app.core.domain_types import DriverName, CustomerName
from app.core.records import Driver, Customer, Order, Shipment, Record
from app.core.registry import Registry
from app.core.repository_protocols import RegistryRepository

logger = logging.getLogger(__name__)


class RegistryService:
    """Serializes registry writes and keeps the database in step with memory."""

    def __init__(
        self, registry: Registry, store: RegistryRepository | None = None,
    ):
        self.registry = registry
        self._store = store
        self._write_lock = asyncio.Lock()

    async def hydrate(self) -> int:
        """Rebuild in-memory state from the store. Returns records restored."""
        if self._store is None:
            return 0
        records = await self._store.load_all()
        for record in records:
            self.registry.commit(record, notify=False)
        logger.info(f"Registry hydrated with {len(records)} records")
        return len(records)

    async def _create(self, record: Record) -> Record:
        async with self._write_lock:
            self.registry.check(record)
            if self._store is not None:
                await self._store.save(record)
            return self.registry.commit(record)

    async def create_driver(self, name: str, id_car: str) -> Driver:
        return await self._create(Driver(name=DriverName(name), id_car=id_car))

    async def create_customer(
        self, name: str, address: str, phone_number: str,
    ) -> Customer:
        return await self._create(Customer(
            name=CustomerName(name), address=address, phone_number=phone_number,
        ))

    async def create_order(
        self,
        order_number: int,
        order_date: datetime,
        order_priority: str,
        customer_name: str,
        customer_address: str,
    ) -> Order:
        return await self._create(self.registry.new_order(
            order_number, order_date, order_priority,
            customer_name, customer_address,
        ))

    async def create_shipment(
        self,
        shipment_id: int,
        driver_name: str,
        receivers: Sequence[str],
        origins: str,
        destinations: str,
        tracking_number: str,
        weight: int,
    ) -> Shipment:
        return await self._create(self.registry.new_shipment(
            shipment_id, driver_name, receivers, origins, destinations,
            tracking_number, weight,
        ))


# Singleton (initialized on startup)
registry_service: RegistryService | None = None


def init_registry_service(
    registry: Registry, store: RegistryRepository | None = None,
) -> RegistryService:
    global registry_service
    registry_service = RegistryService(registry, store)
    return registry_service


def get_registry_service() -> RegistryService:
    """FastAPI dependency for the process-wide registry service."""
    if not registry_service:
        raise RuntimeError("Registry not initialized")
    return registry_service

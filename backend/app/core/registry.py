"""Registry - the single-writer validation and storage engine for all four entity kinds.

Invariants:
    - Every mutation runs under one lock: validate -> append -> index -> release
    - A rejected call raises a RegistryError and leaves every collection and index untouched
    - Enumeration returns immutable tuple snapshots taken under the same lock
    - Notifications fire only after the record is committed, outside the lock

Design Decisions:
    - One Registry instance owns one RegistryState, built at startup and handed to the shell
    - check() / commit() split lets the shell persist between validation and the append
    - A failing notification sink is logged, never propagated: the record is already committed
"""

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from app.core.domain_types import (
    DriverName, CustomerName, OrderNumber, ShipmentId, INITIAL_SHIPMENT_STATUS,
)
from app.core.enforce_registry import validate_record
from app.core.record_snapshot import to_event
from app.core.records import Driver, Customer, Order, Shipment, Record
from app.core.registry_state import RegistryState
from app.core.repository_protocols import Clock, NotificationSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrySnapshot:
    """Point-in-time copy of every collection."""
    drivers: tuple[Driver, ...]
    customers: tuple[Customer, ...]
    orders: tuple[Order, ...]
    shipments: tuple[Shipment, ...]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Pin a datetime to UTC. Naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Registry:
    """Append-only registry of drivers, customers, orders and shipments."""

    def __init__(
        self,
        sink: NotificationSink | None = None,
        clock: Clock = utc_now,
        state: RegistryState | None = None,
    ):
        self._state = state or RegistryState()
        self._sink = sink
        self._clock = clock
        self._lock = threading.Lock()

    # ─── Creation ────────────────────────────────────────────────

    def create_driver(self, name: str, id_car: str) -> Driver:
        return self.commit(Driver(name=DriverName(name), id_car=id_car))

    def create_customer(self, name: str, address: str, phone_number: str) -> Customer:
        return self.commit(Customer(
            name=CustomerName(name), address=address, phone_number=phone_number,
        ))

    def create_order(
        self,
        order_number: int,
        order_date: datetime,
        order_priority: str,
        customer_name: str,
        customer_address: str,
    ) -> Order:
        return self.commit(self.new_order(
            order_number, order_date, order_priority,
            customer_name, customer_address,
        ))

    def create_shipment(
        self,
        shipment_id: int,
        driver_name: str,
        receivers: Sequence[str],
        origins: str,
        destinations: str,
        tracking_number: str,
        weight: int,
    ) -> Shipment:
        return self.commit(self.new_shipment(
            shipment_id, driver_name, receivers, origins, destinations,
            tracking_number, weight,
        ))

    def new_order(
        self,
        order_number: int,
        order_date: datetime,
        order_priority: str,
        customer_name: str,
        customer_address: str,
    ) -> Order:
        """Build an unvalidated Order with order_date pinned to UTC."""
        return Order(
            order_number=OrderNumber(order_number),
            order_date=as_utc(order_date),
            order_priority=order_priority,
            customer_name=CustomerName(customer_name),
            customer_address=customer_address,
        )

    def new_shipment(
        self,
        shipment_id: int,
        driver_name: str,
        receivers: Sequence[str],
        origins: str,
        destinations: str,
        tracking_number: str,
        weight: int,
    ) -> Shipment:
        """Build an unvalidated Shipment stamped with the registry clock."""
        now = self._clock()
        return Shipment(
            shipment_id=ShipmentId(shipment_id),
            driver_name=DriverName(driver_name),
            receivers=tuple(CustomerName(r) for r in receivers),
            origins=origins,
            destinations=destinations,
            tracking_number=tracking_number,
            weight=weight,
            created_at=now,
            updated_at=now,
            status=INITIAL_SHIPMENT_STATUS,
        )

    # ─── Validation / commit ─────────────────────────────────────

    def check(self, record: Record) -> None:
        """Raise the first violation for record against current state. No mutation."""
        with self._lock:
            self._raise_if_invalid(record)

    def commit(self, record: Record, notify: bool = True) -> Record:
        """Validate and append atomically, then notify the sink."""
        with self._lock:
            self._raise_if_invalid(record)
            self._state.append(record)
        logger.info(
            f"Registered {record.ENTITY_KIND.value}",
            extra={"entity_kind": record.ENTITY_KIND.value},
        )
        if notify:
            self._notify(record)
        return record

    def _raise_if_invalid(self, record: Record) -> None:
        error = validate_record(self._state, record)
        if error is not None:
            logger.warning(
                f"Rejected {record.ENTITY_KIND.value}: {error.message}",
                extra={
                    "entity_kind": record.ENTITY_KIND.value,
                    "error_code": error.code,
                },
            )
            raise error

    def _notify(self, record: Record) -> None:
        if self._sink is None:
            return
        try:
            self._sink.publish(to_event(record))
        except Exception as e:
            logger.error(
                f"Notification sink failed for {record.ENTITY_KIND.value}: {e}",
                exc_info=True,
            )

    # ─── Enumeration ─────────────────────────────────────────────

    def drivers(self) -> tuple[Driver, ...]:
        with self._lock:
            return tuple(self._state.drivers)

    def customers(self) -> tuple[Customer, ...]:
        with self._lock:
            return tuple(self._state.customers)

    def orders(self) -> tuple[Order, ...]:
        with self._lock:
            return tuple(self._state.orders)

    def shipments(self) -> tuple[Shipment, ...]:
        with self._lock:
            return tuple(self._state.shipments)

    def snapshot(self) -> RegistrySnapshot:
        """All four collections copied under one lock acquisition."""
        with self._lock:
            return RegistrySnapshot(
                drivers=tuple(self._state.drivers),
                customers=tuple(self._state.customers),
                orders=tuple(self._state.orders),
                shipments=tuple(self._state.shipments),
            )

    def driver_exists(self, name: str) -> bool:
        with self._lock:
            return self._state.driver_exists(name)

    def customer_exists(self, name: str) -> bool:
        with self._lock:
            return self._state.customer_exists(name)

"""Registry Records - immutable value objects for the four entity kinds.

Invariants:
    - Records are frozen: once created they are never mutated (append-only registry)
    - Shipment.receivers is a tuple copy of the caller's sequence, order preserved
    - Shipment.created_at == Shipment.updated_at for every record this core creates

Design Decisions:
    - Frozen dataclasses over ORM rows: the core never touches the DB, the shell maps
      records to ORM models and back
    - ENTITY_KIND as ClassVar: one lookup for logging, events and validation dispatch
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from app.core.domain_types import (
    DriverName, CustomerName, OrderNumber, ShipmentId,
    EntityKind, ShipmentStatus, INITIAL_SHIPMENT_STATUS,
)


@dataclass(frozen=True)
class Driver:
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.DRIVER

    name: DriverName
    id_car: str


@dataclass(frozen=True)
class Customer:
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CUSTOMER

    name: CustomerName
    address: str
    phone_number: str


@dataclass(frozen=True)
class Order:
    """Customer order. customer_address is an informational copy, never cross-checked."""
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.ORDER

    order_number: OrderNumber
    order_date: datetime
    order_priority: str
    customer_name: CustomerName
    customer_address: str


@dataclass(frozen=True)
class Shipment:
    """Shipment handed to one driver for one or more receivers."""
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.SHIPMENT

    shipment_id: ShipmentId
    driver_name: DriverName
    receivers: tuple[CustomerName, ...]
    origins: str
    destinations: str
    tracking_number: str
    weight: int
    created_at: datetime
    updated_at: datetime
    status: ShipmentStatus = INITIAL_SHIPMENT_STATUS


Record = Driver | Customer | Order | Shipment

"""Registry Store - SQLAlchemy persistence for registry records.

Invariants:
    - save() inserts exactly one row per call in its own transaction
    - load_all() returns drivers, customers, orders, shipments - each kind in seq order
    - Kinds are returned in dependency order so replaying them re-validates cleanly
    - Rows are never updated or deleted

Design Decisions:
    - Mapping tables kept explicit per kind: every column visible in one place
    - Datetimes read back without tzinfo (SQLite) are treated as UTC
"""

import logging

from sqlalchemy import select

from app.core.domain_types import (
    DriverName, CustomerName, OrderNumber, ShipmentId, ShipmentStatus,
)
from app.core.records import Driver, Customer, Order, Shipment, Record
from app.core.registry import as_utc
from app.infrastructure.database import DatabaseSessionManager
from app.models.customer import CustomerRow
from app.models.driver import DriverRow
from app.models.order import OrderRow
from app.models.shipment import ShipmentRow

logger = logging.getLogger(__name__)


def _to_row(record: Record):
    if isinstance(record, Driver):
        return DriverRow(name=record.name, id_car=record.id_car)
    if isinstance(record, Customer):
        return CustomerRow(
            name=record.name, address=record.address,
            phone_number=record.phone_number,
        )
    if isinstance(record, Order):
        return OrderRow(
            order_number=record.order_number,
            order_date=record.order_date,
            order_priority=record.order_priority,
            customer_name=record.customer_name,
            customer_address=record.customer_address,
        )
    if isinstance(record, Shipment):
        return ShipmentRow(
            shipment_id=record.shipment_id,
            driver_name=record.driver_name,
            receivers=list(record.receivers),
            origins=record.origins,
            destinations=record.destinations,
            tracking_number=record.tracking_number,
            weight=record.weight,
            status=record.status.value,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def _driver_from_row(row: DriverRow) -> Driver:
    return Driver(name=DriverName(row.name), id_car=row.id_car)


def _customer_from_row(row: CustomerRow) -> Customer:
    return Customer(
        name=CustomerName(row.name), address=row.address,
        phone_number=row.phone_number,
    )


def _order_from_row(row: OrderRow) -> Order:
    return Order(
        order_number=OrderNumber(row.order_number),
        order_date=as_utc(row.order_date),
        order_priority=row.order_priority,
        customer_name=CustomerName(row.customer_name),
        customer_address=row.customer_address,
    )


def _shipment_from_row(row: ShipmentRow) -> Shipment:
    return Shipment(
        shipment_id=ShipmentId(row.shipment_id),
        driver_name=DriverName(row.driver_name),
        receivers=tuple(CustomerName(r) for r in row.receivers),
        origins=row.origins,
        destinations=row.destinations,
        tracking_number=row.tracking_number,
        weight=row.weight,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        status=ShipmentStatus(row.status),
    )


class SqlRegistryStore:
    """RegistryRepository backed by the async SQLAlchemy session manager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def save(self, record: Record) -> None:
        async with self._db.session() as session:
            session.add(_to_row(record))
            await session.commit()

    async def load_all(self) -> list[Record]:
        records: list[Record] = []
        async with self._db.session() as session:
            for model, convert in (
                (DriverRow, _driver_from_row),
                (CustomerRow, _customer_from_row),
                (OrderRow, _order_from_row),
                (ShipmentRow, _shipment_from_row),
            ):
                result = await session.execute(select(model).order_by(model.seq))
                records.extend(convert(row) for row in result.scalars().all())
        logger.info(f"Loaded {len(records)} registry records from database")
        return records

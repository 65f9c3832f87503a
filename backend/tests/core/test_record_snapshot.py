"""Record Snapshot - JSON-safe serialization of registry records and events."""

import json
from datetime import datetime, timezone

from app.core.domain_types import EntityKind, ShipmentStatus
from app.core.record_snapshot import to_record_dict, to_event, from_record_dict
from app.core.records import Driver, Customer, Order, Shipment

T0 = datetime(2026, 5, 4, 8, 30, tzinfo=timezone.utc)


def _shipment() -> Shipment:
    return Shipment(
        shipment_id=100, driver_name="Dan", receivers=("Eve", "Fay"),
        origins="X", destinations="Y", tracking_number="TRK1",
        weight=50, created_at=T0, updated_at=T0,
    )


def test_shipment_dict_is_json_safe():
    data = to_record_dict(_shipment())
    json.dumps(data)
    assert data["receivers"] == ["Eve", "Fay"]
    assert data["status"] == "Pending"
    assert data["created_at"] == T0.isoformat()


def test_record_dict_excludes_class_constants():
    assert "ENTITY_KIND" not in to_record_dict(Driver(name="A", id_car="B"))


def test_event_is_prefixed_with_entity_kind():
    event = to_event(Customer(name="Bob", address="123 St", phone_number="555"))
    assert event == {
        "entity_kind": "customer",
        "name": "Bob",
        "address": "123 St",
        "phone_number": "555",
    }


def test_order_event_serializes_date():
    order = Order(
        order_number=1, order_date=T0, order_priority="high",
        customer_name="Bob", customer_address="123 St",
    )
    assert to_event(order)["order_date"] == "2026-05-04T08:30:00+00:00"


def test_from_record_dict_rebuilds_shipment():
    shipment = _shipment()
    rebuilt = from_record_dict(EntityKind.SHIPMENT, to_event(shipment))
    assert rebuilt == shipment
    assert rebuilt.status is ShipmentStatus.PENDING
    assert isinstance(rebuilt.receivers, tuple)


def test_from_record_dict_rebuilds_order():
    order = Order(
        order_number=3, order_date=T0, order_priority="low",
        customer_name="Bob", customer_address="123 St",
    )
    assert from_record_dict(EntityKind.ORDER, to_record_dict(order)) == order

"""Domain Types - verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - ShipmentStatus has exactly the four lifecycle states, Pending is initial
    - EntityKind covers the four record kinds
"""

from app.core.domain_types import (
    DriverName, CustomerName, OrderNumber, ShipmentId,
    EntityKind, ShipmentStatus, INITIAL_SHIPMENT_STATUS,
)


def test_identity_types_wrap_primitives():
    assert DriverName("Alice") == "Alice"
    assert CustomerName("Bob") == "Bob"
    assert OrderNumber(7) == 7
    assert ShipmentId(100) == 100


def test_shipment_status_has_four_states():
    assert set(ShipmentStatus) == {
        ShipmentStatus.PENDING,
        ShipmentStatus.IN_TRANSIT,
        ShipmentStatus.DELIVERED,
        ShipmentStatus.RETURNED,
    }


def test_shipment_status_values_match_wire_names():
    assert [s.value for s in ShipmentStatus] == [
        "Pending", "InTransit", "Delivered", "Returned",
    ]


def test_initial_status_is_pending():
    assert INITIAL_SHIPMENT_STATUS is ShipmentStatus.PENDING


def test_entity_kind_has_four_kinds():
    assert {k.value for k in EntityKind} == {
        "driver", "customer", "order", "shipment",
    }

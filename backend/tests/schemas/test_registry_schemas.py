"""Registry Schemas - boundary validation for create requests and record responses.

Tests:
    - empty strings pass the schema (the core owns EMPTY_FIELD)
    - weight must be non-negative, order_date must parse
    - responses build directly from frozen core records
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.core.domain_types import ShipmentStatus
from app.core.records import Driver, Shipment
from app.schemas.registry import (
    DriverCreate, CustomerCreate, OrderCreate, ShipmentCreate,
    DriverResponse, ShipmentResponse,
)

T0 = datetime(2026, 2, 2, tzinfo=timezone.utc)


def test_customer_create_accepts_empty_strings():
    body = CustomerCreate(name="", address="", phone_number="")
    assert body.name == ""


def test_driver_create_defaults_id_car():
    assert DriverCreate(name="Alice").id_car == ""


def test_order_create_parses_iso_date():
    body = OrderCreate(
        order_number=1, order_date="2026-02-02T00:00:00+00:00",
        order_priority="high", customer_name="Bob", customer_address="123 St",
    )
    assert body.order_date == T0


def test_order_create_rejects_non_integer_number():
    with pytest.raises(ValidationError):
        OrderCreate(
            order_number="one", order_date=T0, order_priority="high",
            customer_name="Bob", customer_address="123 St",
        )


def test_shipment_create_rejects_negative_weight():
    with pytest.raises(ValidationError):
        ShipmentCreate(
            shipment_id=1, driver_name="Dan", receivers=["Eve"],
            origins="X", destinations="Y", tracking_number="T", weight=-1,
        )


def test_shipment_create_has_no_status_field():
    assert "status" not in ShipmentCreate.model_fields


def test_driver_response_from_record():
    response = DriverResponse.model_validate(Driver(name="Alice", id_car="CAR-1"))
    assert response.model_dump() == {"name": "Alice", "id_car": "CAR-1"}


def test_shipment_response_from_record():
    shipment = Shipment(
        shipment_id=100, driver_name="Dan", receivers=("Eve",),
        origins="X", destinations="Y", tracking_number="TRK1",
        weight=50, created_at=T0, updated_at=T0,
    )
    response = ShipmentResponse.model_validate(shipment)
    assert response.receivers == ["Eve"]
    assert response.status is ShipmentStatus.PENDING
    assert response.model_dump(mode="json")["status"] == "Pending"


@pytest.mark.parametrize("order_number", [2**63, -(2**63) - 1, 2**70])
def test_order_number_outside_bigint_rejected(order_number):
    with pytest.raises(ValidationError):
        OrderCreate(
            order_number=order_number, order_date=T0, order_priority="high",
            customer_name="Bob", customer_address="123 St",
        )


def test_bigint_edges_accepted():
    body = ShipmentCreate(
        shipment_id=-(2**63), driver_name="Dan", receivers=[], origins="X",
        destinations="Y", tracking_number="T", weight=2**63 - 1,
    )
    assert body.weight == 2**63 - 1


@pytest.mark.parametrize("field", ["shipment_id", "weight"])
def test_shipment_integers_outside_bigint_rejected(field):
    fields = {
        "shipment_id": 1, "driver_name": "Dan", "receivers": [],
        "origins": "X", "destinations": "Y", "tracking_number": "T", "weight": 1,
    }
    fields[field] = 2**63
    with pytest.raises(ValidationError):
        ShipmentCreate(**fields)

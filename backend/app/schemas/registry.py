"""Registry Schemas - Pydantic models for the registry API boundary.

Invariants:
    - Create schemas check shape and types only; empty strings pass through so the
      core can reject them with EMPTY_FIELD
    - ShipmentCreate.weight is non-negative at the boundary as well as in the core
    - Integer fields are bounded to the signed 64-bit range of their columns
    - Response schemas mirror the core records field for field

Design Decisions:
    - from_attributes on responses: built straight from frozen core records
    - ShipmentStatus reused from core/domain_types: single source of truth for states
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.domain_types import ShipmentStatus

# Range of the BigInteger columns the records are stored in
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


# ─── Requests ────────────────────────────────────────────────────

class DriverCreate(BaseModel):
    name: str = Field(max_length=200)
    id_car: str = Field("", max_length=200)


class CustomerCreate(BaseModel):
    name: str = Field(max_length=200)
    address: str = Field(max_length=2000)
    phone_number: str = Field(max_length=50)


class OrderCreate(BaseModel):
    """Order creation. order_number is not required to be unique."""
    order_number: int = Field(ge=BIGINT_MIN, le=BIGINT_MAX)
    order_date: datetime
    order_priority: str = Field(max_length=50)
    customer_name: str = Field(max_length=200)
    customer_address: str = Field(max_length=2000)


class ShipmentCreate(BaseModel):
    """Shipment creation. Status and timestamps are assigned by the registry."""
    shipment_id: int = Field(ge=BIGINT_MIN, le=BIGINT_MAX)
    driver_name: str = Field(max_length=200)
    receivers: list[str]
    origins: str
    destinations: str
    tracking_number: str = Field(max_length=200)
    weight: int = Field(ge=0, le=BIGINT_MAX)


# ─── Responses ───────────────────────────────────────────────────

class DriverResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    id_car: str


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    address: str
    phone_number: str


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_number: int
    order_date: datetime
    order_priority: str
    customer_name: str
    customer_address: str


class ShipmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    shipment_id: int
    driver_name: str
    receivers: list[str]
    origins: str
    destinations: str
    tracking_number: str
    weight: int
    status: ShipmentStatus
    created_at: datetime
    updated_at: datetime


class RegistryStats(BaseModel):
    """Collection counts for reporting."""
    drivers: int
    customers: int
    orders: int
    shipments: int
    shipments_by_status: dict[str, int]
    total_weight: int

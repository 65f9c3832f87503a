"""Domain Types - rich types that replace bare primitives across the registry.

Invariants:
    - DriverName and CustomerName are the natural keys of the existence indices
    - OrderNumber and ShipmentId are caller-supplied and never uniqueness-checked
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DriverName = NewType("DriverName", str)
CustomerName = NewType("CustomerName", str)
OrderNumber = NewType("OrderNumber", int)
ShipmentId = NewType("ShipmentId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The four record kinds the registry owns."""
    DRIVER = "driver"
    CUSTOMER = "customer"
    ORDER = "order"
    SHIPMENT = "shipment"


class ShipmentStatus(str, Enum):
    """Shipment lifecycle states. Only PENDING is reachable through creation."""
    PENDING = "Pending"
    IN_TRANSIT = "InTransit"
    DELIVERED = "Delivered"
    RETURNED = "Returned"


INITIAL_SHIPMENT_STATUS: ShipmentStatus = ShipmentStatus.PENDING

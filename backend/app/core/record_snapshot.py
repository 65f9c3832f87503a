"""Record Snapshot - serialization / deserialization for registry records.

Invariants:
    - to_record_dict produces a JSON-safe dict (no tuples, no Enums, no datetimes)
    - from_record_dict(kind, to_record_dict(r)) == r for every record kind
    - to_event is the notification payload: {"entity_kind": ..., **fields}

Design Decisions:
    - Extracted from records.py: records stay plain value objects
    - dataclasses.asdict keeps field lists in one place (the dataclass definition)
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any

from app.core.domain_types import EntityKind, ShipmentStatus
from app.core.records import Driver, Customer, Order, Shipment, Record

_RECORD_TYPES: dict[EntityKind, type] = {
    EntityKind.DRIVER: Driver,
    EntityKind.CUSTOMER: Customer,
    EntityKind.ORDER: Order,
    EntityKind.SHIPMENT: Shipment,
}

_DATETIME_FIELDS: tuple[str, ...] = ("order_date", "created_at", "updated_at")


def _json_safe(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, ShipmentStatus):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


def to_record_dict(record: Record) -> dict:
    """Flatten a record into a JSON-safe dict."""
    return {key: _json_safe(value) for key, value in asdict(record).items()}


def to_event(record: Record) -> dict:
    """Notification payload for a newly created record."""
    return {"entity_kind": record.ENTITY_KIND.value, **to_record_dict(record)}


def from_record_dict(kind: EntityKind, data: dict) -> Record:
    """Rebuild a record from its JSON-safe form."""
    fields = dict(data)
    fields.pop("entity_kind", None)
    for key in _DATETIME_FIELDS:
        if isinstance(fields.get(key), str):
            fields[key] = datetime.fromisoformat(fields[key])
    if kind == EntityKind.SHIPMENT:
        fields["receivers"] = tuple(fields["receivers"])
        fields["status"] = ShipmentStatus(fields.get("status", ShipmentStatus.PENDING))
    return _RECORD_TYPES[kind](**fields)

"""Registry Stats - pure summary counts over one registry snapshot.

Invariants:
    - All counts come from a single Registry.snapshot() (no IO, no DB)
    - Returns a flat JSON-safe dict of integer counts
    - shipments_by_status lists every ShipmentStatus, zero-filled

Design Decisions:
    - Pure function, not a Registry method: the Registry enforces, stats are presentation
"""

from app.core.domain_types import ShipmentStatus
from app.core.registry import Registry


def compute_registry_stats(registry: Registry) -> dict:
    """Compute collection counts from one consistent snapshot. Pure, no IO."""
    snapshot = registry.snapshot()
    by_status = {status.value: 0 for status in ShipmentStatus}
    for shipment in snapshot.shipments:
        by_status[shipment.status.value] += 1

    return {
        "drivers": len(snapshot.drivers),
        "customers": len(snapshot.customers),
        "orders": len(snapshot.orders),
        "shipments": len(snapshot.shipments),
        "shipments_by_status": by_status,
        "total_weight": sum(s.weight for s in snapshot.shipments),
    }

"""Registry State - the four ordered collections and the two existence indices.

Invariants:
    - Collections are append-only lists; insertion order is the only ordering
    - driver_names / customer_names mirror the names in drivers / customers exactly
    - append() is the ONLY mutation path and is called after validation succeeds

Design Decisions:
    - Explicit state object owned by one Registry instance, never a module global
    - Sets for the existence indices: O(1) membership for uniqueness and references
"""

from dataclasses import dataclass, field

from app.core.domain_types import DriverName, CustomerName
from app.core.records import Driver, Customer, Order, Shipment, Record


@dataclass
class RegistryState:
    """In-memory registry storage - pure dataclass, no IO, no locking."""

    drivers: list[Driver] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)
    shipments: list[Shipment] = field(default_factory=list)

    # Existence indices
    driver_names: set[DriverName] = field(default_factory=set)
    customer_names: set[CustomerName] = field(default_factory=set)

    def driver_exists(self, name: str) -> bool:
        return name in self.driver_names

    def customer_exists(self, name: str) -> bool:
        return name in self.customer_names

    def append(self, record: Record) -> None:
        """Append a validated record and index its unique key."""
        if isinstance(record, Driver):
            self.drivers.append(record)
            self.driver_names.add(record.name)
        elif isinstance(record, Customer):
            self.customers.append(record)
            self.customer_names.add(record.name)
        elif isinstance(record, Order):
            self.orders.append(record)
        elif isinstance(record, Shipment):
            self.shipments.append(record)
        else:
            raise TypeError(f"Unsupported record type: {type(record).__name__}")

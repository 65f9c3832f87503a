"""Registry Enforcement - validates a candidate record against the current registry state.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return the error on violation, None on success (the caller decides to raise)
    - validate_* chains the checks for one entity kind - first error wins
    - Shipment: driver check precedes receiver checks; receivers checked in sequence order

Design Decisions:
    - Return errors instead of raising: checks compose with `or` and stay testable
      without pytest.raises around every call
    - Only the empty string counts as empty; whitespace is a caller concern
"""

from app.core.errors import (
    RegistryError, EmptyFieldError, InvalidFieldError, DuplicateEntityError,
    UnknownCustomerError, UnknownDriverError, UnknownReceiverError,
)
from app.core.records import Driver, Customer, Order, Shipment, Record
from app.core.registry_state import RegistryState


def check_not_empty(entity_kind: str, field: str, value: str) -> RegistryError | None:
    """Required string fields must be non-empty."""
    if value == "":
        return EmptyFieldError(entity_kind, field)
    return None


def check_driver_unique(state: RegistryState, name: str) -> RegistryError | None:
    if state.driver_exists(name):
        return DuplicateEntityError("driver", name)
    return None


def check_customer_unique(state: RegistryState, name: str) -> RegistryError | None:
    if state.customer_exists(name):
        return DuplicateEntityError("customer", name)
    return None


def check_customer_exists(state: RegistryState, name: str) -> RegistryError | None:
    if not state.customer_exists(name):
        return UnknownCustomerError(name)
    return None


def check_driver_exists(state: RegistryState, name: str) -> RegistryError | None:
    if not state.driver_exists(name):
        return UnknownDriverError(name)
    return None


def check_receivers_exist(
    state: RegistryState, receivers: tuple[str, ...],
) -> RegistryError | None:
    """Every receiver must be a registered customer. First unknown name wins."""
    for position, name in enumerate(receivers):
        if not state.customer_exists(name):
            return UnknownReceiverError(name, position)
    return None


def check_weight(weight: int) -> RegistryError | None:
    if weight < 0:
        return InvalidFieldError("shipment", "weight", "must be non-negative")
    return None


# ─── Per-kind chains ─────────────────────────────────────────────

def validate_driver(state: RegistryState, driver: Driver) -> RegistryError | None:
    return (
        check_not_empty("driver", "name", driver.name)
        or check_driver_unique(state, driver.name)
    )


def validate_customer(state: RegistryState, customer: Customer) -> RegistryError | None:
    return (
        check_not_empty("customer", "name", customer.name)
        or check_not_empty("customer", "address", customer.address)
        or check_not_empty("customer", "phone_number", customer.phone_number)
        or check_customer_unique(state, customer.name)
    )


def validate_order(state: RegistryState, order: Order) -> RegistryError | None:
    # order_number is deliberately not uniqueness-checked
    return check_customer_exists(state, order.customer_name)


def validate_shipment(state: RegistryState, shipment: Shipment) -> RegistryError | None:
    # shipment_id is deliberately not uniqueness-checked
    return (
        check_driver_exists(state, shipment.driver_name)
        or check_receivers_exist(state, shipment.receivers)
        or check_weight(shipment.weight)
    )


def validate_record(state: RegistryState, record: Record) -> RegistryError | None:
    """Dispatch to the chain for the record's kind."""
    if isinstance(record, Driver):
        return validate_driver(state, record)
    if isinstance(record, Customer):
        return validate_customer(state, record)
    if isinstance(record, Order):
        return validate_order(state, record)
    if isinstance(record, Shipment):
        return validate_shipment(state, record)
    raise TypeError(f"Unsupported record type: {type(record).__name__}")

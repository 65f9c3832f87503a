"""ORM Models - SQLAlchemy declarative models for the four registry tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tables are append-only: the shell only ever INSERTs and SELECTs

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from app.models.driver import DriverRow  # noqa: F401
from app.models.customer import CustomerRow  # noqa: F401
from app.models.order import OrderRow  # noqa: F401
from app.models.shipment import ShipmentRow  # noqa: F401

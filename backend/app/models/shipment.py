"""Shipment ORM - persisted shipment records.

Invariants:
    - seq is the insertion order
    - shipment_id is NOT unique
    - receivers stored as a JSON array, order preserved
    - status is written once at creation and never updated

Design Decisions:
    - JSON column for receivers: the list is read back whole, never queried per element
"""

from datetime import datetime

from sqlalchemy import BigInteger, Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class ShipmentRow(Base):
    """Shipment table row."""
    __tablename__ = "shipments"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    shipment_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    driver_name: Mapped[str] = mapped_column(String(200), nullable=False)
    receivers: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    origins: Mapped[str] = mapped_column(Text, nullable=False)
    destinations: Mapped[str] = mapped_column(Text, nullable=False)
    tracking_number: Mapped[str] = mapped_column(String(200), nullable=False)
    weight: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="Pending",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

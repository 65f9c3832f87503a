"""Driver ORM - persisted driver records.

Invariants:
    - seq is the insertion order; load order == creation order
    - name is unique (mirrors the in-memory driver existence index)

Design Decisions:
    - Integer autoincrement seq over UUID: the only ordering the registry guarantees
      is insertion order, so the key doubles as the sort key
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class DriverRow(Base):
    """Driver table row."""
    __tablename__ = "drivers"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    id_car: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

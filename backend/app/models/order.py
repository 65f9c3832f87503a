"""Order ORM - persisted order records.

Invariants:
    - seq is the insertion order
    - order_number is NOT unique: duplicate order numbers are accepted
    - customer_name is validated by the registry core, not by a foreign key

Design Decisions:
    - No FK to customers.name: referential integrity lives in the core so that
      hydration can re-validate and report it with the same typed errors
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class OrderRow(Base):
    """Order table row."""
    __tablename__ = "orders"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    order_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    order_priority: Mapped[str] = mapped_column(String(50), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    customer_address: Mapped[str] = mapped_column(Text, nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

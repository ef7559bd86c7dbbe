"""Order ORM — the internal, mutable order record. Never leaves modules/orders.

Invariants:
    - id is an integer primary key assigned by storage on insert
    - created_at is set once by the engine; updated_at stays NULL until the first transition
    - status stored by enum name (PENDING, CONFIRMED, ...)

Design Decisions:
    - Non-native enum column (VARCHAR + CHECK): portable across PostgreSQL and SQLite
    - Numeric(12, 2) for amount: money is never a float at rest
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Enum, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from order_service.core.domain_types import OrderStatus
from order_service.db.base import Base


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(String(254), nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20, name="order_status"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def __repr__(self) -> str:
        return f"Order(id={self.id!r}, status={self.status!r})"

"""Car ORM: the `cars` table behind the relational store.

Invariants:
    - id is an integer primary key; SqlCarStore always supplies it explicitly
    - make/model bounded to 100 chars, all four fields non-nullable
    - price is fixed-precision NUMERIC(10, 2): comes back as Decimal
    - created_at defaulted at insertion, never written by the API

Design Decisions:
    - autoincrement=False: ids follow the max-plus-one rule shared with the
      in-memory store, not a database sequence
    - Both client default and server_default on created_at: the row gets a
      timestamp whether inserted through the ORM or by a migration/script
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from car_service.db.base import Base


class Car(Base):
    """One row per car."""
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    make: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2), nullable=False,
    )
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

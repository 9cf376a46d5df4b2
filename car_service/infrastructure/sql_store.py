"""Relational Car Store: CarStore over the `cars` table via SQLAlchemy.

Invariants:
    - One DB session per operation; each mutation commits on its own
    - create() reads MAX(id) and inserts max + 1 explicitly (same rule as memory)
    - Two concurrent creates can read the same MAX(id); the loser fails on the
      primary key and surfaces as DatabaseError
    - delete() returns the row as it was before removal
    - Every SQLAlchemy failure reaches the caller as DatabaseError (no retry)

Design Decisions:
    - Reads go through select(); single-row lookups use session.get()
    - Rows converted to core Car before leaving the store, so routes never see ORM objects
"""

import logging

from sqlalchemy import func, select

from car_service.core.car import (
    Car, CarChanges, CarFields, apply_changes, next_car_id,
)
from car_service.core.domain_types import CarField, CarId
from car_service.infrastructure.database import DatabaseSessionManager
from car_service.models.car import Car as CarModel

logger = logging.getLogger(__name__)


def _to_car(row: CarModel) -> Car:
    return Car(
        id=CarId(row.id),
        make=row.make,
        model=row.model,
        year=row.year,
        price=row.price,
        created_at=row.created_at,
    )


class SqlCarStore:
    """CarStore backed by a relational database."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_all(self) -> list[Car]:
        async with self._db.session() as session:
            result = await session.execute(
                select(CarModel).order_by(CarModel.id),
            )
            return [_to_car(row) for row in result.scalars().all()]

    async def get_by_id(self, car_id: CarId) -> Car | None:
        async with self._db.session() as session:
            row = await session.get(CarModel, car_id)
            return None if row is None else _to_car(row)

    async def create(self, fields: CarFields) -> Car:
        async with self._db.session() as session:
            highest = await session.scalar(select(func.max(CarModel.id)))
            row = CarModel(
                id=next_car_id(highest),
                make=fields["make"],
                model=fields["model"],
                year=fields["year"],
                price=fields["price"],
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            logger.debug(f"Inserted car {row.id}", extra={"car_id": row.id})
            return _to_car(row)

    async def update(self, car_id: CarId, changes: CarChanges) -> Car | None:
        async with self._db.session() as session:
            row = await session.get(CarModel, car_id)
            if row is None:
                return None
            updated = apply_changes(_to_car(row), changes)
            for f in CarField:
                setattr(row, f.value, getattr(updated, f.value))
            await session.commit()
            await session.refresh(row)
            return _to_car(row)

    async def delete(self, car_id: CarId) -> Car | None:
        async with self._db.session() as session:
            row = await session.get(CarModel, car_id)
            if row is None:
                return None
            snapshot = _to_car(row)
            await session.delete(row)
            await session.commit()
            return snapshot

    async def health_check(self) -> bool:
        return await self._db.health_check()

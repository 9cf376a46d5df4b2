"""In-Memory Car Store: ephemeral, insertion-ordered collection for one process.

Invariants:
    - Listing order is insertion order; update keeps a car in its position
    - Ids follow next_car_id (max + 1), so a deleted max id is reused
    - Returned Cars are immutable; callers cannot reach into the collection
    - No awaits inside an operation, so each call is atomic on the event loop

Design Decisions:
    - Owned by the app lifespan and injected (no module-level list)
    - SAMPLE_CARS reproduces the catalogue the service has always started with;
      seeding is controlled by settings.seed_sample_cars
"""

import logging
from typing import Iterable

from car_service.core.car import (
    Car, CarChanges, CarFields, apply_changes, next_car_id,
)
from car_service.core.domain_types import CarId

logger = logging.getLogger(__name__)

SAMPLE_CARS: tuple[Car, ...] = (
    Car(CarId(1), "Toyota", "Corolla", 2020, 10000),
    Car(CarId(2), "Ford", "F150", 2021, 20000),
    Car(CarId(3), "Chevrolet", "Camaro", 2020, 30000),
    Car(CarId(4), "Nissan", "Altima", 2023, 40000),
    Car(CarId(5), "Honda", "Civic", 2020, 50000),
    Car(CarId(6), "BMW", "X5", 2025, 60000),
    Car(CarId(7), "Mercedes", "C-Class", 2026, 70000),
    Car(CarId(8), "Audi", "A4", 2024, 80000),
    Car(CarId(9), "Volkswagen", "Golf", 2026, 90000),
    Car(CarId(10), "Hyundai", "Elantra", 2025, 100000),
)


class InMemoryCarStore:
    """CarStore backed by a plain list."""

    def __init__(self, cars: Iterable[Car] = ()):
        self._cars: list[Car] = list(cars)

    def __len__(self) -> int:
        return len(self._cars)

    async def list_all(self) -> list[Car]:
        return list(self._cars)

    async def get_by_id(self, car_id: CarId) -> Car | None:
        index = self._index_of(car_id)
        return None if index is None else self._cars[index]

    async def create(self, fields: CarFields) -> Car:
        highest = max((c.id for c in self._cars), default=None)
        car = Car(
            id=next_car_id(highest),
            make=fields["make"],
            model=fields["model"],
            year=fields["year"],
            price=fields["price"],
        )
        self._cars.append(car)
        logger.debug(f"Stored car {car.id}", extra={"car_id": car.id})
        return car

    async def update(self, car_id: CarId, changes: CarChanges) -> Car | None:
        index = self._index_of(car_id)
        if index is None:
            return None
        updated = apply_changes(self._cars[index], changes)
        self._cars[index] = updated
        return updated

    async def delete(self, car_id: CarId) -> Car | None:
        index = self._index_of(car_id)
        if index is None:
            return None
        return self._cars.pop(index)

    async def health_check(self) -> bool:
        return True

    def _index_of(self, car_id: CarId) -> int | None:
        for index, car in enumerate(self._cars):
            if car.id == car_id:
                return index
        return None

"""Car Resource Rules: the record type and the pure rules every store shares.

Invariants:
    - Car is immutable; an update produces a new Car with the same id
    - next_car_id returns max(existing) + 1, or 1 for an empty collection
    - find_missing_fields treats absent, None, "", 0 and False alike
    - parse_car_id returns None for anything that is not an ASCII base-10 integer
    - apply_changes never touches id or created_at

Design Decisions:
    - Max-plus-one ids over a monotonic counter: deleting the highest id and
      creating again reuses it, and two concurrent creates can collide
    - CarFields / CarChanges as TypedDicts: a missing key means "absent",
      which keeps partial updates explicit without a sentinel value
"""

import re
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, TypedDict

from car_service.core.domain_types import CarField, CarId, Price

_INTEGER_ID = re.compile(r"^[+-]?[0-9]+$")
# Largest value the `cars.id` INTEGER column can hold
_MAX_CAR_ID = 2**31 - 1


class CarFields(TypedDict):
    """Complete, typed input for store.create()."""
    make: str
    model: str
    year: int
    price: Price


class CarChanges(TypedDict, total=False):
    """Partial update: only the keys present are applied."""
    make: str
    model: str
    year: int
    price: Price


@dataclass(frozen=True)
class Car:
    """A stored car. created_at is only set by the relational store."""
    id: CarId
    make: str
    model: str
    year: int
    price: Price
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "price": json_number(self.price),
        }
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        return data


def next_car_id(highest_id: int | None) -> CarId:
    """Id for the next created car, given the current highest id (None if empty)."""
    if highest_id is None:
        return CarId(1)
    return CarId(highest_id + 1)


def find_missing_fields(body: Mapping[str, Any]) -> list[str]:
    """Required create fields that are absent or falsy, in declaration order."""
    return [f.value for f in CarField if not body.get(f.value)]


def parse_car_id(raw: str) -> CarId | None:
    raw = raw.strip()
    if not _INTEGER_ID.match(raw):
        return None
    value = int(raw)
    if abs(value) > _MAX_CAR_ID:
        return None
    return CarId(value)


def apply_changes(car: Car, changes: CarChanges) -> Car:
    """Return car with the supplied fields replaced. Unknown keys are ignored."""
    updates = {f.value: changes[f.value] for f in CarField if f.value in changes}
    if not updates:
        return car
    return replace(car, **updates)


def json_number(value: Price) -> int | float:
    """Render a stored numeric as JSON: integral values as int, others as float."""
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    return value

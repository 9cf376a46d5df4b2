"""Car Schemas: Pydantic models that type request bodies at the API boundary.

Invariants:
    - CarCreate runs only after the truthiness check, so every field is present
    - year coerces numeric strings to int; price accepts int, finite float, or numeric strings
    - inf and NaN prices (1e400, NaN, Infinity) fail validation before any store call
    - CarUpdate tells "absent" (not in model_fields_set) from "null" (rejected)
    - Unknown keys (including id) are ignored, so id can never be written

Design Decisions:
    - Schemas convert to core TypedDicts (to_fields / to_changes): stores never
      depend on Pydantic
    - min_length=1 on make/model in updates: a record never loses a required value
"""

from pydantic import BaseModel, Field, FiniteFloat, model_validator

from car_service.core.car import CarChanges, CarFields


class CarCreate(BaseModel):
    """Complete car for POST /cars."""
    make: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    year: int
    price: int | FiniteFloat

    def to_fields(self) -> CarFields:
        return CarFields(
            make=self.make, model=self.model, year=self.year, price=self.price,
        )


class CarUpdate(BaseModel):
    """Partial car for PUT /cars/{id}: any subset of the four fields."""
    make: str | None = Field(None, min_length=1, max_length=100)
    model: str | None = Field(None, min_length=1, max_length=100)
    year: int | None = None
    price: int | FiniteFloat | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self

    def to_changes(self) -> CarChanges:
        return CarChanges(**self.model_dump(exclude_unset=True))

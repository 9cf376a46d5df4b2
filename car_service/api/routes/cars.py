"""Cars: CRUD endpoints for the Car resource.

Invariants:
    - Create rejects absent or falsy make/model/year/price with 400 before any store call
    - {car_id} that is not an integer matches nothing → the ordinary 404
    - Update and delete check existence first, then mutate (check-then-mutate;
      a car removed in between still yields 404 from the mutation)
    - Responses are Car.to_dict() bodies; errors are {"message": ...}

Design Decisions:
    - Raw dict bodies, typed after the truthiness check: "", 0 and false must be
      reported with the same message as a missing field
    - get_car_or_404 shared by get/update/delete (DRY over duplication)
"""

import logging
from typing import Any, TypeVar

from fastapi import APIRouter, Body, Depends, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from car_service.api.dependencies import get_car_store
from car_service.core.car import Car, find_missing_fields, parse_car_id
from car_service.core.errors import MissingFieldsError, ResourceNotFoundError
from car_service.core.repository_protocols import CarStore
from car_service.schemas.car import CarCreate, CarUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cars", tags=["cars"])

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def get_car_or_404(raw_id: str, store: CarStore) -> Car:
    """Get car or raise 404."""
    car_id = parse_car_id(raw_id)
    car = None if car_id is None else await store.get_by_id(car_id)
    if car is None:
        raise ResourceNotFoundError("Car", raw_id)
    return car


def _parse_body(schema: type[SchemaT], body: dict[str, Any]) -> SchemaT:
    try:
        return schema.model_validate(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(), body=body)


@router.get("")
async def list_cars(store: CarStore = Depends(get_car_store)):
    """List every car."""
    return [car.to_dict() for car in await store.list_all()]


@router.get("/{car_id}")
async def get_car(car_id: str, store: CarStore = Depends(get_car_store)):
    car = await get_car_or_404(car_id, store)
    return car.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_car(
    body: dict[str, Any] | None = Body(None),
    store: CarStore = Depends(get_car_store),
):
    """Create a car. The store assigns the id."""
    body = body or {}
    missing = find_missing_fields(body)
    if missing:
        raise MissingFieldsError(missing)
    fields = _parse_body(CarCreate, body).to_fields()
    car = await store.create(fields)
    logger.info(f"Car {car.id} created", extra={"car_id": car.id})
    return car.to_dict()


@router.put("/{car_id}")
async def update_car(
    car_id: str,
    body: dict[str, Any] | None = Body(None),
    store: CarStore = Depends(get_car_store),
):
    """Partial update: only the supplied fields change."""
    existing = await get_car_or_404(car_id, store)
    changes = _parse_body(CarUpdate, body or {}).to_changes()
    car = await store.update(existing.id, changes)
    if car is None:
        raise ResourceNotFoundError("Car", car_id)
    logger.info(f"Car {car.id} updated", extra={"car_id": car.id})
    return car.to_dict()


@router.delete("/{car_id}")
async def delete_car(car_id: str, store: CarStore = Depends(get_car_store)):
    existing = await get_car_or_404(car_id, store)
    car = await store.delete(existing.id)
    if car is None:
        raise ResourceNotFoundError("Car", car_id)
    logger.info(f"Car {car.id} deleted", extra={"car_id": car.id})
    return {"message": "Car deleted successfully", "car": car.to_dict()}

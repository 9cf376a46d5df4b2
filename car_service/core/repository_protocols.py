"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Every CarStore answers "not found" with None and mutates nothing
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: the relational store does IO, so the in-memory store
      exposes the same awaitable surface and the routes never branch on backend
"""

from typing import Protocol

from car_service.core.car import Car, CarChanges, CarFields
from car_service.core.domain_types import CarId


class CarStore(Protocol):
    """Contract for Car persistence: implemented by shell."""
    async def list_all(self) -> list[Car]: ...
    async def get_by_id(self, car_id: CarId) -> Car | None: ...
    async def create(self, fields: CarFields) -> Car: ...
    async def update(self, car_id: CarId, changes: CarChanges) -> Car | None: ...
    async def delete(self, car_id: CarId) -> Car | None: ...
    async def health_check(self) -> bool: ...

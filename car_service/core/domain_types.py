"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - CarId wraps int: ids are assigned by the store, never by the client
    - Price is int | float | Decimal (Decimal only comes out of the relational store)
    - All valid backends encoded as an Enum: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for StoreBackend: pydantic-settings parses it straight from env
"""

from decimal import Decimal
from enum import Enum
from typing import NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

CarId = NewType("CarId", int)


# ─── Value Types ─────────────────────────────────────────────────

Price = Union[int, float, Decimal]


# ─── Enums ───────────────────────────────────────────────────────

class StoreBackend(str, Enum):
    """Which CarStore implementation backs the service."""
    MEMORY = "memory"
    DATABASE = "database"


class CarField(str, Enum):
    """Client-settable Car fields, in the order they are reported."""
    MAKE = "make"
    MODEL = "model"
    YEAR = "year"
    PRICE = "price"

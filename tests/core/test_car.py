"""Car rules: id assignment, required-field check, id parsing, partial updates.

Invariants:
    - next_car_id is max + 1, or 1 when the collection is empty
    - find_missing_fields treats absent, None, "", 0 and False the same
    - parse_car_id only accepts base-10 integers
    - apply_changes never touches id or created_at
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from car_service.core.car import (
    Car, CarChanges, apply_changes, find_missing_fields, json_number,
    next_car_id, parse_car_id,
)
from car_service.core.domain_types import CarId


def _corolla(**overrides) -> Car:
    fields = dict(id=CarId(1), make="Toyota", model="Corolla", year=2020, price=10000)
    fields.update(overrides)
    return Car(**fields)


# --- next_car_id --------------------------------------------------------------

def test_first_id_is_one():
    assert next_car_id(None) == 1


def test_next_id_is_highest_plus_one():
    assert next_car_id(1) == 2
    assert next_car_id(41) == 42


# --- find_missing_fields ------------------------------------------------------

def test_complete_body_has_no_missing_fields():
    body = {"make": "Toyota", "model": "Corolla", "year": 2020, "price": 10000}
    assert find_missing_fields(body) == []


def test_empty_body_reports_all_fields_in_order():
    assert find_missing_fields({}) == ["make", "model", "year", "price"]


@pytest.mark.parametrize("falsy", [None, "", 0, 0.0, False])
def test_falsy_value_counts_as_missing(falsy):
    body = {"make": "Toyota", "model": "Corolla", "year": 2020, "price": falsy}
    assert find_missing_fields(body) == ["price"]


def test_zero_string_is_present():
    body = {"make": "Toyota", "model": "Corolla", "year": "2020", "price": "0"}
    assert find_missing_fields(body) == []


# --- parse_car_id -------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("1", 1), ("42", 42), (" 7 ", 7), ("007", 7), ("-3", -3),
])
def test_parse_car_id_accepts_integers(raw, expected):
    assert parse_car_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "", "1.5", "1e3", "0x10", "12abc", "99999999999", "١", "１２",
])
def test_parse_car_id_rejects_everything_else(raw):
    assert parse_car_id(raw) is None


# --- apply_changes ------------------------------------------------------------

def test_apply_changes_replaces_only_supplied_fields():
    car = _corolla()
    updated = apply_changes(car, CarChanges(price=15000))
    assert updated == _corolla(price=15000)
    assert car.price == 10000  # input car untouched


def test_apply_changes_with_no_changes_returns_same_car():
    car = _corolla()
    assert apply_changes(car, CarChanges()) is car


def test_apply_changes_ignores_id_and_created_at():
    created = datetime(2026, 1, 1, tzinfo=timezone.utc)
    car = _corolla(created_at=created)
    updated = apply_changes(car, {"id": 99, "created_at": None, "make": "Lexus"})
    assert updated.id == 1
    assert updated.created_at == created
    assert updated.make == "Lexus"


def test_apply_changes_is_idempotent():
    changes = CarChanges(model="Camry", year=2022)
    once = apply_changes(_corolla(), changes)
    assert apply_changes(once, changes) == once


# --- to_dict / json_number ----------------------------------------------------

def test_to_dict_without_created_at():
    assert _corolla().to_dict() == {
        "id": 1, "make": "Toyota", "model": "Corolla", "year": 2020, "price": 10000,
    }


def test_to_dict_renders_created_at_as_iso():
    created = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    assert _corolla(created_at=created).to_dict()["created_at"] == "2026-10-19T12:00:00+00:00"


def test_json_number_renders_integral_decimal_as_int():
    value = json_number(Decimal("10000.00"))
    assert value == 10000
    assert isinstance(value, int)


def test_json_number_renders_fractional_decimal_as_float():
    assert json_number(Decimal("9999.99")) == 9999.99


def test_json_number_passes_plain_numbers_through():
    assert json_number(12.5) == 12.5
    assert json_number(7) == 7

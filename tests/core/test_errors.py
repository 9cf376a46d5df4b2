"""Error hierarchy: status codes and the {"message": ...} response body."""

from car_service.core.errors import (
    CarServiceError, DatabaseError, ErrorCategory, ErrorSeverity,
    MissingFieldsError, ResourceNotFoundError, MISSING_FIELDS_MESSAGE,
)


def test_not_found_is_404_with_car_not_found_message():
    err = ResourceNotFoundError("Car", "999")
    assert err.http_status == 404
    assert err.to_response() == {"message": "Car not found"}
    assert err.context.resource_id == "999"
    assert err.severity is ErrorSeverity.INFO


def test_missing_fields_is_400_with_fixed_message():
    err = MissingFieldsError(["price"])
    assert err.http_status == 400
    assert err.to_response() == {
        "message": "Missing required fields: make, model, year, and price are required",
    }
    assert err.missing_fields == ["price"]
    assert err.category is ErrorCategory.VALIDATION
    assert MISSING_FIELDS_MESSAGE == err.message


def test_database_error_is_critical_5xx():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Database execute failed: Connection or operational error"


def test_all_errors_share_base_class():
    for err in (
        ResourceNotFoundError("Car", "1"),
        MissingFieldsError([]),
        DatabaseError("x", "query"),
    ):
        assert isinstance(err, CarServiceError)
        assert err.code

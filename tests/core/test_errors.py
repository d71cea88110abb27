"""Error Hierarchy — verifies codes, statuses, and response envelopes."""

from users_api.core.errors import (
    ErrorCategory, NotFoundError, StorageError, UsersApiError, ValidationError,
)


def test_all_errors_share_base_class():
    for exc in (
        ValidationError([]), NotFoundError(1), StorageError("boom", "load"),
    ):
        assert isinstance(exc, UsersApiError)


def test_validation_error_response_carries_details():
    details = [{"field": "age", "message": "too old", "type": "less_than_equal"}]
    exc = ValidationError(details)
    assert exc.http_status == 400
    assert exc.category == ErrorCategory.VALIDATION
    assert exc.to_response() == {"error": details}


def test_not_found_response_is_null_user():
    exc = NotFoundError("7")
    assert exc.http_status == 404
    assert exc.to_response() == {"user": None}
    assert "7" in exc.message


def test_storage_error_response_hides_cause():
    exc = StorageError("Permission denied: /data/users.json", "save")
    assert exc.http_status == 500
    assert exc.operation == "save"
    assert exc.to_response() == {"error": "Internal Server Error"}
    assert "Permission denied" in exc.message

"""
Tests for the application exception hierarchy.

Verifies error codes, HTTP status mapping and the API payload shape
produced by BaseApplicationError.to_dict().
"""

import pytest

from core.exceptions import (
    BaseApplicationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


class TestBaseApplicationError:
    """Tests for BaseApplicationError defaults and serialization."""

    def test_uses_default_error_code_when_not_given(self):
        error = BaseApplicationError("Something broke")

        assert error.error_code == "APPLICATION_ERROR"
        assert error.details == {}

    def test_to_dict_omits_empty_details(self):
        error = BaseApplicationError("Something broke", error_code="BROKEN")

        assert error.to_dict() == {"error": "Something broke", "error_code": "BROKEN"}

    def test_to_dict_includes_details(self):
        error = NotFoundError(
            "User 7 doesn't exist.",
            error_code="USER_NOT_FOUND",
            details={"user_id": 7},
        )

        assert error.to_dict() == {
            "error": "User 7 doesn't exist.",
            "error_code": "USER_NOT_FOUND",
            "details": {"user_id": 7},
        }

    def test_str_includes_error_code(self):
        error = ValidationError("Group name is required")

        assert str(error) == "[VALIDATION_ERROR] Group name is required"


@pytest.mark.parametrize(
    ("exc_class", "status_code", "error_code"),
    [
        (ValidationError, 400, "VALIDATION_ERROR"),
        (NotFoundError, 404, "NOT_FOUND"),
        (PermissionDeniedError, 403, "PERMISSION_DENIED"),
    ],
)
def test_subclasses_map_to_http_status(exc_class, status_code, error_code):
    error = exc_class("message")

    assert isinstance(error, BaseApplicationError)
    assert error.status_code == status_code
    assert error.error_code == error_code

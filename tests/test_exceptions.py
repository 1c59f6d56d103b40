"""Tests for the exception hierarchy and error responses."""

import pytest

from console_rbac.core.exceptions import (
    AccessDeniedError,
    AuthorizationError,
    ConfigurationError,
    ConsoleRbacError,
    InvalidTokenError,
    ModuleLicensingError,
    PermissionSyncError,
    create_error_response,
    get_http_status_code,
)


class TestExceptions:
    """Test error codes and HTTP mapping."""

    def test_error_code_defaults_to_class_name(self):
        error = PermissionSyncError("sync failed")

        assert error.error_code == "PermissionSyncError"
        assert error.details == {}
        assert str(error) == "sync failed"

    def test_explicit_error_code_and_details(self):
        error = AccessDeniedError("no", error_code="ROUTE_DENIED", details={"reason": "module"})

        assert error.error_code == "ROUTE_DENIED"
        assert error.details == {"reason": "module"}

    @pytest.mark.parametrize("exc_type,status", [
        (InvalidTokenError, 401),
        (AccessDeniedError, 403),
        (AuthorizationError, 403),
        (PermissionSyncError, 502),
        (ModuleLicensingError, 502),
        (ConfigurationError, 500),
        (ConsoleRbacError, 500),
    ])
    def test_http_status_codes(self, exc_type, status):
        assert get_http_status_code(exc_type("x")) == status

    def test_unmapped_exception_is_500(self):
        assert get_http_status_code(RuntimeError("x")) == 500

    def test_subclass_uses_nearest_mapping(self):
        class CustomDenied(AccessDeniedError):
            pass

        assert get_http_status_code(CustomDenied("x")) == 403

    def test_create_error_response(self):
        error = ModuleLicensingError("modules unavailable", details={"status_code": 503})

        assert create_error_response(error) == {
            "error": {
                "code": "ModuleLicensingError",
                "message": "modules unavailable",
                "details": {"status_code": 503},
                "type": "ModuleLicensingError",
            }
        }

"""Exception hierarchy for console-rbac."""

from .base import (
    ConsoleRbacError,
    ConfigurationError,
    create_error_response,
    get_http_status_code,
)
from .auth import (
    AuthorizationError,
    AccessDeniedError,
    InvalidTokenError,
    PermissionSyncError,
    ModuleLicensingError,
)

__all__ = [
    "ConsoleRbacError",
    "ConfigurationError",
    "create_error_response",
    "get_http_status_code",
    "AuthorizationError",
    "AccessDeniedError",
    "InvalidTokenError",
    "PermissionSyncError",
    "ModuleLicensingError",
]

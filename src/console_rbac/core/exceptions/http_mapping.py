"""HTTP status code mapping for exceptions."""

from .base import ConsoleRbacError, ConfigurationError
from .auth import (
    AuthorizationError,
    AccessDeniedError,
    InvalidTokenError,
    PermissionSyncError,
    ModuleLicensingError,
)


HTTP_STATUS_MAP = {
    # 401 Unauthorized
    InvalidTokenError: 401,

    # 403 Forbidden
    AuthorizationError: 403,
    AccessDeniedError: 403,

    # 500 Internal Server Error
    ConfigurationError: 500,
    ConsoleRbacError: 500,

    # 502 Bad Gateway
    PermissionSyncError: 502,
    ModuleLicensingError: 502,
}

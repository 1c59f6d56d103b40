"""Authorization and permission-source exceptions for console-rbac."""

from .base import ConsoleRbacError


class AuthorizationError(ConsoleRbacError):
    """Base exception for authorization errors."""
    pass


class AccessDeniedError(AuthorizationError):
    """Raised when the current user may not open a route."""
    pass


class InvalidTokenError(AuthorizationError):
    """Raised when session token claims cannot be decoded."""
    pass


class PermissionSyncError(ConsoleRbacError):
    """Raised when the permission sync endpoint fails."""
    pass


class ModuleLicensingError(ConsoleRbacError):
    """Raised when the tenant modules endpoint fails."""
    pass
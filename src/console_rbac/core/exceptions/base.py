"""Base exceptions for console-rbac.

This module defines the base exception hierarchy for the console-rbac library.
All exceptions inherit from ConsoleRbacError and include error codes and
details for API responses.

Authorization decisions never raise: "denied" is a boolean. These exceptions
cover the services around the decision core (sync, licensing, caching,
token decoding) and the route guard.
"""

from typing import Any, Dict, Optional


class ConsoleRbacError(Exception):
    """Base exception for all console-rbac errors.

    All exceptions in the console-rbac library inherit from this base class
    and include structured error information for better debugging and API responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(ConsoleRbacError):
    """Raised when settings or static tables are invalid."""
    pass


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code (500 for anything unmapped)
    """
    from .http_mapping import HTTP_STATUS_MAP

    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500


def create_error_response(exception: ConsoleRbacError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The console-rbac exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }

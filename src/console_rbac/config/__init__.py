"""Configuration module for console-rbac.

Constants, logging configuration and environment-driven settings.
"""

from .constants import (
    SyncDefaults,
    ApiPaths,
    HttpHeaders,
    CacheKeys,
    CacheTTL,
    GateText,
    PermissionSource,
    AccessDeniedReason,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

from .settings import RbacSettings, get_settings

__all__ = [
    # Constants
    "SyncDefaults",
    "ApiPaths",
    "HttpHeaders",
    "CacheKeys",
    "CacheTTL",
    "GateText",
    "PermissionSource",
    "AccessDeniedReason",

    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "RbacSettings",
    "get_settings",
]

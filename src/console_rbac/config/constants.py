"""Constants and enums for console-rbac.

This module defines the constants, enums, and default values shared by the
permission core and the services that feed it. Wire values correspond to the
console API's permission sync and module licensing endpoints.
"""

from enum import Enum
from typing import Final


class SyncDefaults:
    """Default timings for the permission sync service (seconds)."""

    POLL_INTERVAL: Final[float] = 120.0          # 2 minutes
    MIN_FETCH_INTERVAL: Final[float] = 5.0       # debounce between fetches
    MIN_HIDDEN_DURATION: Final[float] = 30.0     # resync after the page was hidden this long
    REQUEST_TIMEOUT: Final[float] = 10.0
    MODULES_CACHE_TTL: Final[float] = 60.0       # modules dedupe window


class ApiPaths:
    """Console API endpoints consumed by the permission core."""

    PERMISSIONS_SYNC: Final[str] = "/api/v1/me/permissions/sync"
    TENANT_MODULES: Final[str] = "/api/v1/me/modules"


class HttpHeaders:
    """Header names used by the sync protocol."""

    ETAG: Final[str] = "ETag"
    IF_NONE_MATCH: Final[str] = "If-None-Match"
    PERMISSION_STALE: Final[str] = "X-Permission-Stale"
    TENANT_ID: Final[str] = "X-Tenant-ID"


class CacheKeys:
    """Cache key patterns."""

    KEY_PREFIX: Final[str] = "console_perms"
    TENANT_PERMISSIONS: Final[str] = "{prefix}:{tenant_id}"


class CacheTTL:
    """Cache TTL values in seconds."""

    PERMISSIONS: Final[int] = 86400    # 24 hours


class GateText:
    """User-facing strings rendered by the gate components."""

    LOADING_TOOLTIP: Final[str] = "Loading permissions..."
    SINGLE_REQUIRED: Final[str] = "Required permission: {label}"
    ALL_REQUIRED: Final[str] = "Required permissions: {labels}"
    ANY_REQUIRED: Final[str] = "Required: one of {labels}"


class PermissionSource(str, Enum):
    """Where an effective permission set came from."""

    LIVE = "live"            # permission sync source (authoritative)
    SESSION = "session"      # session token claims (provisional)
    NONE = "none"            # nothing available yet


class AccessDeniedReason(str, Enum):
    """Why a route guard refused access."""

    MODULE = "module"
    PERMISSION = "permission"

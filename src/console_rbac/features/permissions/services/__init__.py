"""Permission services: resolution, access decisions and live sync."""

from .resolver import PermissionContext, resolve_effective_permissions
from .access import AccessDecisions
from .sync_service import PermissionSyncService

__all__ = [
    "PermissionContext",
    "resolve_effective_permissions",
    "AccessDecisions",
    "PermissionSyncService",
]

"""Permission feature.

Catalog and role hierarchy, effective permission resolution, the access
decision API and the services that feed them (live sync, snapshot cache).
"""

from .entities import *  # noqa: F401,F403
from .entities import __all__ as _entities_all
from .services import (
    PermissionContext,
    resolve_effective_permissions,
    AccessDecisions,
    PermissionSyncService,
)
from .repositories import InMemoryPermissionCache, RedisPermissionCache
from .models import PermissionSyncResponse

__all__ = list(_entities_all) + [
    "PermissionContext",
    "resolve_effective_permissions",
    "AccessDecisions",
    "PermissionSyncService",
    "InMemoryPermissionCache",
    "RedisPermissionCache",
    "PermissionSyncResponse",
]

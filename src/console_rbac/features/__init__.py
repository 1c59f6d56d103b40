"""Features module for console-rbac.

Permission resolution and sync, declarative gates, navigation filtering
and route guarding.
"""

# Permission features
from .permissions import PermissionContext, AccessDecisions, PermissionSyncService

# Presentation features
from .gates import Can, Cannot, install_gates
from .navigation import filter_navigation, ModuleLicensingService
from .routes import RouteGuard, check_route_access

__all__ = [
    # Permission features
    "PermissionContext",
    "AccessDecisions",
    "PermissionSyncService",

    # Presentation features
    "Can",
    "Cannot",
    "install_gates",
    "filter_navigation",
    "ModuleLicensingService",
    "RouteGuard",
    "check_route_access",
]

"""Route permission map and route guard."""

from .route_permissions import (
    LicensedModule,
    ROUTE_PERMISSIONS,
    match_route_permission,
    get_routes_for_permission,
    is_protected_route,
    check_route_access,
    ensure_route_access,
)
from .guard import RouteGuard, RouteAccessDenied

__all__ = [
    "LicensedModule",
    "ROUTE_PERMISSIONS",
    "match_route_permission",
    "get_routes_for_permission",
    "is_protected_route",
    "check_route_access",
    "ensure_route_access",
    "RouteGuard",
    "RouteAccessDenied",
]

"""Routes feature: route permission map and FastAPI route guard."""

from .entities import RoutePermissionConfig, RouteAccessResult
from .services import (
    LicensedModule,
    ROUTE_PERMISSIONS,
    match_route_permission,
    get_routes_for_permission,
    is_protected_route,
    check_route_access,
    ensure_route_access,
    RouteGuard,
    RouteAccessDenied,
)

__all__ = [
    "RoutePermissionConfig",
    "RouteAccessResult",
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

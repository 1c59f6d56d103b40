"""Route access entities."""

from .route_config import RoutePermissionConfig, RouteAccessResult

__all__ = ["RoutePermissionConfig", "RouteAccessResult"]

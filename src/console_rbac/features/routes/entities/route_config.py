"""Route access configuration and decision entities."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ....config.constants import AccessDeniedReason


@dataclass(frozen=True)
class RoutePermissionConfig:
    """Requirements for a route pattern.

    ``module`` is the licensing layer (checked first), ``permission`` the
    RBAC layer. ``redirect_to`` and ``message`` shape the denial.
    """

    permission: str
    module: Optional[str] = None
    redirect_to: Optional[str] = None
    message: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "permission", getattr(self.permission, "value", self.permission))


@dataclass(frozen=True)
class RouteAccessResult:
    """Outcome of a route access check."""

    allowed: bool
    reason: Optional[AccessDeniedReason] = None
    config: Optional[RoutePermissionConfig] = None

    def to_detail(self) -> Dict[str, Any]:
        """Denial body used by the route guard."""
        config = self.config
        return {
            "reason": self.reason.value if self.reason else None,
            "permission": config.permission if config else None,
            "module": config.module if config else None,
            "message": config.message if config else None,
        }

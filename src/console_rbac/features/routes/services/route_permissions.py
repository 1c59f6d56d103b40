"""
Route permission map.

Maps dashboard URL patterns to the module (licensing) and permission (RBAC)
they require. Patterns support ``*`` (one path segment) and ``**`` (any
number of segments). Exact entries win over patterns; among patterns the
longer one wins.

Core features (dashboard, team, billing, audit) carry no module: they are
always licensed and controlled by RBAC only.
"""

import logging
import re
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Optional, Pattern

from ....config.constants import AccessDeniedReason
from ....core.exceptions import AccessDeniedError
from ...navigation.entities.modules import TenantModules
from ...permissions.entities.catalog import Permission
from ...permissions.entities.protocols import AccessDecisionProtocol
from ..entities.route_config import RouteAccessResult, RoutePermissionConfig

logger = logging.getLogger(__name__)


class LicensedModule(str, Enum):
    """Module ids known to the licensing backend."""

    DASHBOARD = "dashboard"
    ASSETS = "assets"
    FINDINGS = "findings"
    SCANS = "scans"
    REPORTS = "reports"
    AUDIT = "audit"
    COMPONENTS = "components"
    PENTEST = "pentest"
    CREDENTIALS = "credentials"
    REMEDIATION = "remediation"
    THREAT_INTEL = "threat_intel"
    INTEGRATIONS = "integrations"


def _route(permission: Permission, module: Optional[LicensedModule] = None, message: Optional[str] = None) -> RoutePermissionConfig:
    return RoutePermissionConfig(
        permission=permission.value,
        module=module.value if module else None,
        message=message,
    )


_ADMIN_AUDIT = "Audit logs require admin or owner privileges."
_ADMIN_BILLING = "Billing information requires admin or owner privileges."

ROUTE_PERMISSIONS: Dict[str, RoutePermissionConfig] = {
    # Dashboard
    "/": _route(Permission.DASHBOARD_READ),

    # Scoping
    "/attack-surface": _route(Permission.ASSETS_READ, LicensedModule.ASSETS),
    "/asset-groups": _route(Permission.ASSET_GROUPS_READ, LicensedModule.ASSETS),
    "/scope-config": _route(Permission.SCOPE_READ, LicensedModule.ASSETS),

    # Discovery
    "/assets/**": _route(Permission.ASSETS_READ, LicensedModule.ASSETS),
    "/scans": _route(Permission.SCANS_READ, LicensedModule.SCANS),
    "/scans/**": _route(Permission.SCANS_READ, LicensedModule.SCANS),
    "/exposures": _route(Permission.FINDINGS_READ, LicensedModule.FINDINGS),
    "/exposures/**": _route(Permission.FINDINGS_READ, LicensedModule.FINDINGS),
    "/credentials": _route(Permission.CREDENTIALS_READ, LicensedModule.CREDENTIALS),
    "/credentials/**": _route(Permission.CREDENTIALS_READ, LicensedModule.CREDENTIALS),
    "/components": _route(Permission.COMPONENTS_READ, LicensedModule.COMPONENTS),
    "/components/**": _route(Permission.COMPONENTS_READ, LicensedModule.COMPONENTS),

    # Prioritization
    "/threat-intel": _route(Permission.VULNERABILITIES_READ, LicensedModule.THREAT_INTEL),
    "/threat-intel/**": _route(Permission.VULNERABILITIES_READ, LicensedModule.THREAT_INTEL),
    "/risk-analysis": _route(Permission.VULNERABILITIES_READ, LicensedModule.THREAT_INTEL),
    "/business-impact": _route(Permission.VULNERABILITIES_READ, LicensedModule.THREAT_INTEL),

    # Validation
    "/pentest/**": _route(Permission.PENTEST_READ, LicensedModule.PENTEST),
    "/attack-simulation": _route(Permission.PENTEST_READ, LicensedModule.PENTEST),
    "/control-testing": _route(Permission.PENTEST_READ, LicensedModule.PENTEST),

    # Mobilization
    "/remediation": _route(Permission.REMEDIATION_READ, LicensedModule.REMEDIATION),
    "/remediation/**": _route(Permission.REMEDIATION_READ, LicensedModule.REMEDIATION),
    "/workflows": _route(Permission.WORKFLOWS_READ, LicensedModule.REMEDIATION),
    "/workflows/**": _route(Permission.WORKFLOWS_READ, LicensedModule.REMEDIATION),

    # Insights
    "/findings": _route(Permission.FINDINGS_READ, LicensedModule.FINDINGS),
    "/findings/**": _route(Permission.FINDINGS_READ, LicensedModule.FINDINGS),
    "/reports": _route(Permission.REPORTS_READ, LicensedModule.REPORTS),
    "/reports/**": _route(Permission.REPORTS_READ, LicensedModule.REPORTS),

    # Scanner settings
    "/agents": _route(Permission.AGENTS_READ, LicensedModule.SCANS),
    "/agents/**": _route(Permission.AGENTS_READ, LicensedModule.SCANS),
    "/scan-profiles": _route(Permission.SCAN_PROFILES_READ, LicensedModule.SCANS),
    "/scan-profiles/**": _route(Permission.SCAN_PROFILES_READ, LicensedModule.SCANS),
    "/tools": _route(Permission.TOOLS_READ, LicensedModule.SCANS),
    "/tools/**": _route(Permission.TOOLS_READ, LicensedModule.SCANS),
    "/capabilities": _route(Permission.TOOLS_READ, LicensedModule.SCANS),
    "/capabilities/**": _route(Permission.TOOLS_READ, LicensedModule.SCANS),

    # Organization settings
    "/settings/tenant": _route(
        Permission.TEAM_UPDATE, message="You need admin privileges to access tenant settings."
    ),
    "/settings/users": _route(Permission.MEMBERS_READ),
    "/settings/users/**": _route(Permission.MEMBERS_READ),
    "/settings/roles": _route(Permission.ROLES_READ),
    "/settings/roles/**": _route(Permission.ROLES_READ),
    "/settings/access-control/**": _route(Permission.GROUPS_READ),
    "/settings/audit": _route(Permission.AUDIT_READ, message=_ADMIN_AUDIT),
    "/settings/audit/**": _route(Permission.AUDIT_READ, message=_ADMIN_AUDIT),
    "/settings/billing": _route(Permission.BILLING_READ, message=_ADMIN_BILLING),
    "/settings/billing/**": _route(Permission.BILLING_READ, message=_ADMIN_BILLING),
    "/settings/integrations": _route(Permission.INTEGRATIONS_READ, LicensedModule.INTEGRATIONS),
    "/settings/integrations/**": _route(Permission.INTEGRATIONS_READ, LicensedModule.INTEGRATIONS),
}


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> Pattern[str]:
    regex = re.escape(pattern).replace(r"\*\*", ".*").replace(r"\*", "[^/]+")
    return re.compile(f"^{regex}$")


def _normalize_path(path: str) -> str:
    if path.endswith("/") and path != "/":
        return path[:-1]
    return path


def match_route_permission(
    path: str,
    routes: Optional[Dict[str, RoutePermissionConfig]] = None,
) -> Optional[RoutePermissionConfig]:
    """Find the config for a path: exact entry first, then the longest matching pattern."""
    routes = ROUTE_PERMISSIONS if routes is None else routes
    path = _normalize_path(path)

    config = routes.get(path)
    if config is not None:
        return config

    patterns = sorted((p for p in routes if "*" in p), key=len, reverse=True)
    for pattern in patterns:
        if _compile_pattern(pattern).match(path):
            return routes[pattern]
    return None


def get_routes_for_permission(
    permission: str,
    routes: Optional[Dict[str, RoutePermissionConfig]] = None,
) -> List[str]:
    """All route patterns guarded by ``permission``."""
    routes = ROUTE_PERMISSIONS if routes is None else routes
    permission = getattr(permission, "value", permission)
    return [route for route, config in routes.items() if config.permission == permission]


def is_protected_route(path: str, routes: Optional[Dict[str, RoutePermissionConfig]] = None) -> bool:
    return match_route_permission(path, routes) is not None


def check_route_access(
    path: str,
    access: AccessDecisionProtocol,
    modules: Optional[TenantModules] = None,
    routes: Optional[Dict[str, RoutePermissionConfig]] = None,
) -> RouteAccessResult:
    """Decide whether the current user may open ``path``.

    Unmapped paths are allowed. The module check fails closed: an empty
    licensed list denies every module-gated route.
    """
    config = match_route_permission(path, routes)
    if config is None:
        return RouteAccessResult(allowed=True)

    modules = modules or TenantModules.empty()
    if config.module and not modules.has_module_strict(config.module):
        logger.debug(f"Route {path} denied: module {config.module} not licensed")
        return RouteAccessResult(allowed=False, reason=AccessDeniedReason.MODULE, config=config)

    if not access.can(config.permission):
        logger.debug(f"Route {path} denied: missing permission {config.permission}")
        return RouteAccessResult(allowed=False, reason=AccessDeniedReason.PERMISSION, config=config)

    return RouteAccessResult(allowed=True, config=config)


def ensure_route_access(
    path: str,
    access: AccessDecisionProtocol,
    modules: Optional[TenantModules] = None,
    routes: Optional[Dict[str, RoutePermissionConfig]] = None,
) -> RouteAccessResult:
    """Like ``check_route_access`` but raises on denial.

    Raises:
        AccessDeniedError: If the route is denied; ``details`` holds the reason
    """
    result = check_route_access(path, access, modules, routes)
    if not result.allowed:
        config = result.config
        raise AccessDeniedError(
            config.message if config and config.message else f"Access denied to {path}",
            details=result.to_detail(),
        )
    return result

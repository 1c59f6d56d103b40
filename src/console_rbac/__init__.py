"""Console RBAC - permission core for the multi-tenant security console.

Resolves a user's effective permissions per tenant (live sync with session
claims as a provisional fallback), answers access questions and applies them
to gates, navigation and routes.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    RbacSettings,
    get_settings,
    PermissionSource,
    AccessDeniedReason,
)

from .core.exceptions import (
    # Base Exception
    ConsoleRbacError,

    # Common Exceptions
    ConfigurationError,
    AuthorizationError,
    AccessDeniedError,
    InvalidTokenError,
    PermissionSyncError,
    ModuleLicensingError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .core.value_objects import TenantId
from .core.http_client import create_api_client

from .features.permissions import (
    # Catalog
    Permission,
    Role,
    ALL_PERMISSIONS,
    ALL_ROLES,
    ROLE_HIERARCHY,
    is_valid_permission,
    is_valid_role,
    get_role_level,
    is_role_at_least,
    get_permission_label,
    expand_permission_group,

    # Sources
    PermissionSnapshot,
    SessionClaims,
    TenantContext,
    EffectivePermissions,

    # Resolution and decisions
    PermissionContext,
    resolve_effective_permissions,
    AccessDecisions,

    # Sync and cache
    PermissionSyncService,
    InMemoryPermissionCache,
    RedisPermissionCache,
)

from .features.gates import Can, Cannot, HideMode, DisableMode, install_gates

from .features.navigation import (
    NavItem,
    NavGroup,
    TenantModules,
    ReleaseStatus,
    filter_navigation,
    ModuleLicensingService,
)

from .features.routes import (
    RoutePermissionConfig,
    RouteAccessResult,
    match_route_permission,
    check_route_access,
    RouteGuard,
)

__all__ = [
    "__version__",

    # Configuration
    "RbacSettings",
    "get_settings",
    "PermissionSource",
    "AccessDeniedReason",

    # Exceptions
    "ConsoleRbacError",
    "ConfigurationError",
    "AuthorizationError",
    "AccessDeniedError",
    "InvalidTokenError",
    "PermissionSyncError",
    "ModuleLicensingError",
    "get_http_status_code",
    "create_error_response",

    # Core
    "TenantId",
    "create_api_client",

    # Catalog
    "Permission",
    "Role",
    "ALL_PERMISSIONS",
    "ALL_ROLES",
    "ROLE_HIERARCHY",
    "is_valid_permission",
    "is_valid_role",
    "get_role_level",
    "is_role_at_least",
    "get_permission_label",
    "expand_permission_group",

    # Sources
    "PermissionSnapshot",
    "SessionClaims",
    "TenantContext",
    "EffectivePermissions",

    # Resolution and decisions
    "PermissionContext",
    "resolve_effective_permissions",
    "AccessDecisions",

    # Sync and cache
    "PermissionSyncService",
    "InMemoryPermissionCache",
    "RedisPermissionCache",

    # Gates
    "Can",
    "Cannot",
    "HideMode",
    "DisableMode",
    "install_gates",

    # Navigation
    "NavItem",
    "NavGroup",
    "TenantModules",
    "ReleaseStatus",
    "filter_navigation",
    "ModuleLicensingService",

    # Routes
    "RoutePermissionConfig",
    "RouteAccessResult",
    "match_route_permission",
    "check_route_access",
    "RouteGuard",
]

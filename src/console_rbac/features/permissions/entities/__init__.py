"""Permission entities: catalog, roles, snapshots and protocols.

``role_defaults`` is not re-exported here; import it directly
when seeding data.
"""

from .catalog import (
    Permission,
    ALL_PERMISSIONS,
    PERMISSION_GROUPS,
    PERMISSION_LABELS,
    is_valid_permission,
    get_permission_label,
    expand_permission_group,
)
from .roles import (
    Role,
    ALL_ROLES,
    ROLE_HIERARCHY,
    is_valid_role,
    get_role_level,
    is_role_at_least,
)
from .snapshot import (
    PermissionSnapshot,
    SessionClaims,
    TenantContext,
    EffectivePermissions,
    StoredPermissions,
    normalize_permissions,
)
from .protocols import AccessDecisionProtocol, PermissionCacheProtocol

__all__ = [
    # Catalog
    "Permission",
    "ALL_PERMISSIONS",
    "PERMISSION_GROUPS",
    "PERMISSION_LABELS",
    "is_valid_permission",
    "get_permission_label",
    "expand_permission_group",

    # Roles
    "Role",
    "ALL_ROLES",
    "ROLE_HIERARCHY",
    "is_valid_role",
    "get_role_level",
    "is_role_at_least",

    # Snapshots
    "PermissionSnapshot",
    "SessionClaims",
    "TenantContext",
    "EffectivePermissions",
    "StoredPermissions",
    "normalize_permissions",

    # Protocols
    "AccessDecisionProtocol",
    "PermissionCacheProtocol",
]

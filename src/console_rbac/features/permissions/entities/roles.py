"""
Tenant roles and the role hierarchy.

Roles are coarse privilege buckets with a total order
(``viewer < member < admin < owner``). They are used for deliberately
role-gated operations such as "is owner"; feature access is decided by
permissions.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, Optional


class Role(str, Enum):
    """Tenant role identifiers, matching the backend tenant roles."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


ALL_ROLES: FrozenSet[str] = frozenset(r.value for r in Role)

# Higher level = more privileges
ROLE_HIERARCHY: Dict[str, int] = {
    Role.VIEWER.value: 0,
    Role.MEMBER.value: 1,
    Role.ADMIN.value: 2,
    Role.OWNER.value: 3,
}

UNKNOWN_ROLE_LEVEL = -1


def _role_key(role: Any) -> Optional[str]:
    if isinstance(role, Role):
        return role.value
    if isinstance(role, str):
        return role
    return None


def is_valid_role(value: Any) -> bool:
    """Check whether a value is one of the four role identifiers."""
    key = _role_key(value)
    return key is not None and key in ALL_ROLES


def get_role_level(role: Any) -> int:
    """Get the hierarchy level of a role; unknown or absent roles are -1."""
    key = _role_key(role)
    if key is None:
        return UNKNOWN_ROLE_LEVEL
    return ROLE_HIERARCHY.get(key, UNKNOWN_ROLE_LEVEL)


def is_role_at_least(actual: Any, required: Any) -> bool:
    """
    Check if a role has at least the privileges of another.

    ``is_role_at_least("admin", "member")`` is True. An absent actual role is
    never treated as a wildcard: it fails every check, including a check
    against an unrecognized required role.
    """
    if actual is None or actual == "":
        return False
    return get_role_level(actual) >= get_role_level(required)

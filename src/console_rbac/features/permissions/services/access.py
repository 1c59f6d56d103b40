"""
Access decision API.

The one contract every consumer (gates, navigation filter, route guard,
templates) uses for authorization-sensitive rendering. Permission checks are
exact set membership with no role bypass: owners and admins simply have large
permission sets. Role checks fail closed when the tenant role is unknown.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, FrozenSet, Optional

from ..entities.roles import Role, is_role_at_least
from ..entities.snapshot import EffectivePermissions

if TYPE_CHECKING:
    from .resolver import PermissionContext


def _key(value: Any) -> Any:
    return getattr(value, "value", value)


@dataclass(frozen=True)
class AccessDecisions:
    """Immutable access decisions for one effective permission set and role."""

    permissions: FrozenSet[str] = frozenset()
    is_loading: bool = False
    tenant_role: Optional[str] = None
    tenant_id: Optional[str] = None

    @classmethod
    def from_effective(
        cls,
        effective: EffectivePermissions,
        tenant_role: Optional[str] = None,
        tenant_id: Optional[str] = None,
    ) -> "AccessDecisions":
        return cls(
            permissions=effective.permissions,
            is_loading=effective.is_loading,
            tenant_role=_key(tenant_role),
            tenant_id=tenant_id,
        )

    @classmethod
    def from_context(cls, context: "PermissionContext") -> "AccessDecisions":
        """Build from a ``PermissionContext``."""
        return cls.from_effective(context.effective, context.tenant_role, context.tenant_id)

    # Permission checks

    def can(self, permission: Any) -> bool:
        permission = _key(permission)
        return isinstance(permission, str) and permission in self.permissions

    def can_any(self, *permissions: Any) -> bool:
        return any(self.can(p) for p in permissions)

    def can_all(self, *permissions: Any) -> bool:
        return all(self.can(p) for p in permissions)

    def cannot(self, permission: Any) -> bool:
        return not self.can(permission)

    # Role checks

    def is_role(self, role: Any) -> bool:
        return bool(self.tenant_role) and self.tenant_role == _key(role)

    def is_any_role(self, *roles: Any) -> bool:
        if not self.tenant_role:
            return False
        return any(self.tenant_role == _key(r) for r in roles)

    def is_at_least(self, role: Any) -> bool:
        if not self.tenant_role:
            return False
        return is_role_at_least(self.tenant_role, role)

    def is_owner(self) -> bool:
        return self.is_role(Role.OWNER)

    def is_admin(self) -> bool:
        """Admin or higher (owners pass too)."""
        return self.is_at_least(Role.ADMIN)

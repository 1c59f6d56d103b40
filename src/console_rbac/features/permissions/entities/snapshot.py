"""Permission source entities: live snapshots, session claims and tenant context."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from jose import jwt, JWTError

from ....config.constants import PermissionSource
from ....core.exceptions import InvalidTokenError


def normalize_permissions(values: Optional[Iterable[Any]]) -> FrozenSet[str]:
    """Collapse an iterable of identifiers into a frozenset of plain strings.

    Enum members are reduced to their values; non-string and blank entries
    are dropped.
    """
    if not values:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    result = set()
    for value in values:
        value = getattr(value, "value", value)
        if isinstance(value, str) and value:
            result.add(value)
    return frozenset(result)


@dataclass(frozen=True)
class PermissionSnapshot:
    """One delivery from the live permission sync source for a tenant."""

    tenant_id: Optional[str]
    permissions: FrozenSet[str] = frozenset()
    version: int = 0
    is_loading: bool = False
    error: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "permissions", normalize_permissions(self.permissions))

    @classmethod
    def loading(cls, tenant_id: Optional[str], permissions: Iterable[str] = (), version: int = 0) -> "PermissionSnapshot":
        """Snapshot for a tenant whose permissions have not been delivered yet."""
        return cls(tenant_id=tenant_id, permissions=normalize_permissions(permissions), version=version, is_loading=True)


@dataclass(frozen=True)
class SessionClaims:
    """Permission data embedded in the session token at authentication time.

    Possibly stale: used only as the provisional source while the live
    snapshot is loading.
    """

    user_id: Optional[str] = None
    tenant_id: Optional[str] = None
    tenant_role: Optional[str] = None
    permissions: FrozenSet[str] = frozenset()
    roles: FrozenSet[str] = frozenset()
    email: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "permissions", normalize_permissions(self.permissions))
        object.__setattr__(self, "roles", normalize_permissions(self.roles))

    @classmethod
    def from_claims(cls, claims: Optional[Dict[str, Any]]) -> "SessionClaims":
        """Build from a decoded token payload.

        ``tenant_role`` falls back to ``role``, ``id`` to ``sub`` and ``roles``
        to ``realm_access.roles``.
        """
        claims = claims or {}
        realm_access = claims.get("realm_access") or {}
        roles = claims.get("roles") or realm_access.get("roles") or []
        permissions = claims.get("permissions") or []
        if not isinstance(permissions, (list, tuple, set, frozenset)):
            permissions = []
        return cls(
            user_id=claims.get("id") or claims.get("sub"),
            tenant_id=claims.get("tenant_id"),
            tenant_role=claims.get("tenant_role") or claims.get("role"),
            permissions=normalize_permissions(permissions),
            roles=normalize_permissions(roles if isinstance(roles, (list, tuple, set, frozenset)) else ()),
            email=claims.get("email"),
        )

    @classmethod
    def from_token(
        cls,
        token: str,
        key: Optional[Any] = None,
        algorithms: Optional[List[str]] = None,
        audience: Optional[str] = None,
    ) -> "SessionClaims":
        """Decode a session token and build claims from its payload.

        Without a key the payload is read unverified, which is acceptable for
        UI gating: the API re-checks every request server-side.

        Raises:
            InvalidTokenError: If the token cannot be decoded or fails verification
        """
        try:
            if key is None:
                payload = jwt.get_unverified_claims(token)
            else:
                payload = jwt.decode(
                    token,
                    key,
                    algorithms=algorithms or ["RS256"],
                    audience=audience,
                    options={"verify_aud": audience is not None},
                )
        except JWTError as e:
            raise InvalidTokenError(
                f"Session token could not be decoded: {e}",
                details={"verified": key is not None},
            ) from e
        return cls.from_claims(payload)


@dataclass(frozen=True)
class TenantContext:
    """The active tenant as selected by the application."""

    tenant_id: str
    role: Optional[str] = None


@dataclass(frozen=True)
class EffectivePermissions:
    """Resolver output: the single effective permission set for the active tenant."""

    permissions: FrozenSet[str] = frozenset()
    is_loading: bool = False
    source: PermissionSource = PermissionSource.NONE

    def __contains__(self, permission: object) -> bool:
        return getattr(permission, "value", permission) in self.permissions

    def __len__(self) -> int:
        return len(self.permissions)


@dataclass(frozen=True)
class StoredPermissions:
    """Cached permission snapshot for one tenant."""

    permissions: List[str]
    version: int = 0
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "permissions": list(self.permissions),
            "version": self.version,
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoredPermissions":
        """Rebuild from ``to_dict`` output.

        Raises:
            ValueError: If the payload is not a valid cache record
        """
        if not isinstance(data, dict) or not isinstance(data.get("permissions"), list):
            raise ValueError("Invalid stored permissions payload")
        updated_at = data.get("updated_at")
        return cls(
            permissions=[p for p in data["permissions"] if isinstance(p, str)],
            version=int(data.get("version") or 0),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else datetime.now(timezone.utc),
        )

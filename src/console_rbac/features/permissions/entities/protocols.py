"""Protocol interfaces for permission feature dependency injection.

Defines contracts for access decisions and permission snapshot caching so
that gates, the navigation filter and the route guard depend on behaviour
rather than concrete classes.
"""

from abc import abstractmethod
from typing import FrozenSet, Optional, Protocol, runtime_checkable, List

from .snapshot import StoredPermissions


@runtime_checkable
class AccessDecisionProtocol(Protocol):
    """Protocol for the access decision contract used by every consumer."""

    @property
    @abstractmethod
    def permissions(self) -> FrozenSet[str]:
        """Effective permission set."""
        ...

    @property
    @abstractmethod
    def is_loading(self) -> bool:
        """True while the live permission source has not delivered."""
        ...

    @property
    @abstractmethod
    def tenant_role(self) -> Optional[str]:
        """Role of the user in the active tenant, if known."""
        ...

    @abstractmethod
    def can(self, permission: str) -> bool:
        """Check exact membership in the effective permission set."""
        ...

    @abstractmethod
    def can_any(self, *permissions: str) -> bool:
        """Check that at least one permission is held."""
        ...

    @abstractmethod
    def can_all(self, *permissions: str) -> bool:
        """Check that every permission is held."""
        ...

    @abstractmethod
    def cannot(self, permission: str) -> bool:
        """Inverse of ``can``."""
        ...

    @abstractmethod
    def is_role(self, role: str) -> bool:
        """Check the tenant role exactly."""
        ...

    @abstractmethod
    def is_any_role(self, *roles: str) -> bool:
        """Check the tenant role against several roles."""
        ...

    @abstractmethod
    def is_at_least(self, role: str) -> bool:
        """Check the tenant role against the role hierarchy."""
        ...

    @abstractmethod
    def is_owner(self) -> bool:
        """Check for the owner role."""
        ...

    @abstractmethod
    def is_admin(self) -> bool:
        """Check for admin or higher."""
        ...


@runtime_checkable
class PermissionCacheProtocol(Protocol):
    """Protocol for per-tenant permission snapshot storage.

    Implementations never raise: failures are logged and reported as a miss.
    """

    @abstractmethod
    async def get(self, tenant_id: str) -> Optional[StoredPermissions]:
        """Get the cached snapshot for a tenant, None if missing or expired."""
        ...

    @abstractmethod
    async def set(self, tenant_id: str, permissions: List[str], version: int) -> bool:
        """Store a snapshot for a tenant."""
        ...

    @abstractmethod
    async def delete(self, tenant_id: str) -> bool:
        """Remove the snapshot for a tenant."""
        ...

    @abstractmethod
    async def clear_all(self) -> int:
        """Remove every cached snapshot; returns the number removed."""
        ...

"""
Effective permission resolution.

Combines the live permission snapshot and the session claims into the single
effective permission set for the active tenant. Precedence, first match wins:

1. Live snapshot with a non-empty set: used verbatim.
2. Live snapshot finished loading (or already delivered once for this tenant)
   with an empty set: empty. No fallback.
3. Live snapshot loading or unavailable, claims non-empty: claims, provisional.
4. Otherwise empty.

The role default table is never consulted here.
"""

import logging
from typing import Callable, List, Optional

from ....config.constants import PermissionSource
from ..entities.snapshot import (
    EffectivePermissions,
    PermissionSnapshot,
    SessionClaims,
    TenantContext,
)
from .access import AccessDecisions

logger = logging.getLogger(__name__)


def resolve_effective_permissions(
    live: Optional[PermissionSnapshot],
    claims: Optional[SessionClaims],
    *,
    live_delivered: bool = False,
) -> EffectivePermissions:
    """Resolve the effective permission set.

    Args:
        live: Latest live snapshot, None when the sync source is unavailable
        claims: Session claims, None when there is no session
        live_delivered: True once the live source has delivered for this tenant

    Returns:
        Effective permissions with loading flag and source
    """
    live_loading = bool(live is not None and live.is_loading and not live_delivered)

    if live is not None and live.permissions:
        return EffectivePermissions(live.permissions, live_loading, PermissionSource.LIVE)

    if live is not None and not live_loading:
        return EffectivePermissions(frozenset(), False, PermissionSource.LIVE)

    if claims is not None and claims.permissions:
        return EffectivePermissions(claims.permissions, live_loading, PermissionSource.SESSION)

    return EffectivePermissions(frozenset(), live_loading, PermissionSource.NONE)


class PermissionContext:
    """Holds the resolver inputs for one user session and memoises the result.

    Inputs are passed in explicitly (tenant selection, live snapshots, session
    claims). Subscribers are called with the new ``EffectivePermissions``
    after every input change.
    """

    def __init__(self, claims: Optional[SessionClaims] = None):
        self._tenant: Optional[TenantContext] = None
        self._snapshot: Optional[PermissionSnapshot] = None
        self._claims: Optional[SessionClaims] = claims
        self._delivered = False
        self._effective: Optional[EffectivePermissions] = None
        self._subscribers: List[Callable[[EffectivePermissions], None]] = []

    # Inputs

    @property
    def tenant(self) -> Optional[TenantContext]:
        return self._tenant

    @property
    def tenant_id(self) -> Optional[str]:
        return self._tenant.tenant_id if self._tenant else None

    @property
    def snapshot(self) -> Optional[PermissionSnapshot]:
        return self._snapshot

    @property
    def claims(self) -> Optional[SessionClaims]:
        return self._claims

    @property
    def is_delivered(self) -> bool:
        """True once the live source has delivered for the active tenant."""
        return self._delivered

    def set_tenant(self, tenant_id: Optional[str], role: Optional[str] = None) -> None:
        """Select the active tenant.

        Switching to a different tenant resets the live snapshot to loading
        and forgets the previous delivery. Re-selecting the same tenant only
        updates the role.
        """
        if tenant_id == self.tenant_id:
            if self._tenant is not None and role is not None and role != self._tenant.role:
                self._tenant = TenantContext(tenant_id=tenant_id, role=role)
                self._changed()
            return

        logger.debug(f"Switching tenant: {self.tenant_id} -> {tenant_id}")
        self._tenant = TenantContext(tenant_id=tenant_id, role=role) if tenant_id else None
        self._snapshot = PermissionSnapshot.loading(tenant_id) if tenant_id else None
        self._delivered = False
        self._changed()

    def apply_snapshot(self, snapshot: PermissionSnapshot) -> bool:
        """Apply a live snapshot.

        Returns:
            False if the snapshot belongs to another tenant and was dropped
        """
        if snapshot.tenant_id != self.tenant_id:
            logger.debug(
                f"Dropping permission snapshot for tenant {snapshot.tenant_id}, "
                f"active tenant is {self.tenant_id}"
            )
            return False

        self._snapshot = snapshot
        if not snapshot.is_loading:
            self._delivered = True
        self._changed()
        return True

    def set_claims(self, claims: Optional[SessionClaims]) -> None:
        """Replace the session claims (login, token refresh)."""
        self._claims = claims
        self._changed()

    def clear(self) -> None:
        """Forget everything (logout)."""
        self._tenant = None
        self._snapshot = None
        self._claims = None
        self._delivered = False
        self._changed()

    # Outputs

    @property
    def effective(self) -> EffectivePermissions:
        if self._effective is None:
            self._effective = resolve_effective_permissions(
                self._snapshot,
                self._claims_for_active_tenant(),
                live_delivered=self._delivered,
            )
        return self._effective

    @property
    def tenant_role(self) -> Optional[str]:
        """Role in the active tenant: the selected tenant's role, else the claims role."""
        if self._tenant is None:
            return None
        if self._tenant.role:
            return self._tenant.role
        claims = self._claims_for_active_tenant()
        return claims.tenant_role if claims else None

    def decisions(self) -> AccessDecisions:
        """Access decisions for the current state."""
        return AccessDecisions.from_context(self)

    def subscribe(self, callback: Callable[[EffectivePermissions], None]) -> Callable[[], None]:
        """Register a change callback; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _claims_for_active_tenant(self) -> Optional[SessionClaims]:
        claims = self._claims
        if claims is None or self._tenant is None or claims.tenant_id is None:
            return claims
        return claims if claims.tenant_id == self._tenant.tenant_id else None

    def _changed(self) -> None:
        self._effective = None
        effective = self.effective
        for callback in list(self._subscribers):
            try:
                callback(effective)
            except Exception as e:
                logger.error(f"Permission subscriber {callback!r} failed: {e}")

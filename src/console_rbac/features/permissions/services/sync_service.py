"""
Permission sync service.

Produces the live permission snapshot consumed by ``PermissionContext``:

- Initial load: cached snapshot shown as loading, then ``GET`` the sync
  endpoint (or bootstrap data, when the page already embedded it)
- ETag / ``If-None-Match`` conditional requests; 304 means unchanged
- Debounced fetches (5s) and polling (2 minutes)
- Forced refresh when the API reports stale permissions
- Fallback to the cached snapshot when a sync fails

Retries are driven by polling, stale signals and page resumes only; there is
no exponential backoff.
"""

import asyncio
import logging
import time
from typing import Callable, Iterable, Optional

import httpx
from pydantic import ValidationError

from ....config.constants import HttpHeaders
from ....config.settings import RbacSettings, get_settings
from ....core.exceptions import PermissionSyncError
from ....core.value_objects import TenantId
from ..entities.protocols import PermissionCacheProtocol
from ..entities.snapshot import EffectivePermissions, PermissionSnapshot
from ..models.responses import PermissionSyncResponse
from .resolver import PermissionContext

logger = logging.getLogger(__name__)


class PermissionSyncService:
    """Keeps a ``PermissionContext`` in step with the console permission API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        context: PermissionContext,
        cache: Optional[PermissionCacheProtocol] = None,
        settings: Optional[RbacSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._http = http_client
        self._context = context
        self._cache = cache
        self._settings = settings or get_settings()
        self._clock = clock

        self._etag: Optional[str] = None
        self._last_fetch: Optional[float] = None
        self._version = 0
        self._last_error: Optional[PermissionSyncError] = None

    @property
    def context(self) -> PermissionContext:
        return self._context

    @property
    def etag(self) -> Optional[str]:
        return self._etag

    @property
    def version(self) -> int:
        return self._version

    @property
    def last_error(self) -> Optional[PermissionSyncError]:
        return self._last_error

    async def switch_tenant(self, tenant_id: Optional[str], role: Optional[str] = None) -> None:
        """Select a tenant and show its cached permissions while loading.

        Raises:
            ValueError: If ``tenant_id`` is a blank string
        """
        if tenant_id is not None:
            tenant_id = str(TenantId(tenant_id))

        changed = tenant_id != self._context.tenant_id
        self._context.set_tenant(tenant_id, role)
        if not changed:
            return

        self._etag = None
        self._last_fetch = None
        self._version = 0
        self._last_error = None

        if tenant_id and self._cache is not None:
            stored = await self._cache.get(tenant_id)
            if stored is not None and self._context.tenant_id == tenant_id:
                logger.debug(f"Using {len(stored.permissions)} cached permissions for tenant {tenant_id} while loading")
                self._version = stored.version
                self._context.apply_snapshot(
                    PermissionSnapshot.loading(tenant_id, stored.permissions, stored.version)
                )

    async def apply_bootstrap(self, tenant_id: str, permissions: Iterable[str], version: int = 0) -> bool:
        """Apply permissions delivered with the page bootstrap; no sync call follows.

        Returns:
            False if the bootstrap data is for a tenant that is not active
        """
        tenant_id = str(TenantId(tenant_id))
        permissions = list(permissions)
        applied = self._context.apply_snapshot(
            PermissionSnapshot(tenant_id=tenant_id, permissions=permissions, version=version)
        )
        if not applied:
            return False

        self._version = version
        logger.debug(f"Using bootstrap permissions for tenant {tenant_id}: {len(permissions)} permissions, version {version}")
        if self._cache is not None:
            await self._cache.set(tenant_id, permissions, version)
        return True

    async def fetch(self, force: bool = False) -> EffectivePermissions:
        """Fetch permissions for the active tenant.

        Never raises for transport or server errors: they are logged, recorded
        on the snapshot and the cached (or current) permissions are kept.
        """
        tenant_id = self._context.tenant_id
        if not tenant_id:
            self._context.apply_snapshot(PermissionSnapshot(tenant_id=None))
            return self._context.effective

        now = self._clock()
        if not force and self._last_fetch is not None:
            elapsed = now - self._last_fetch
            if elapsed < self._settings.min_fetch_interval:
                logger.debug(
                    f"Skipping permission fetch, last fetch was {elapsed:.1f}s ago "
                    f"(min: {self._settings.min_fetch_interval}s)"
                )
                return self._context.effective
        self._last_fetch = now

        headers = {HttpHeaders.TENANT_ID: tenant_id}
        if not force and self._etag:
            headers[HttpHeaders.IF_NONE_MATCH] = self._etag

        try:
            response = await self._http.get(self._settings.permissions_sync_path, headers=headers)
            if self._context.tenant_id != tenant_id:
                logger.debug(f"Discarding permission sync response for previous tenant {tenant_id}")
                return self._context.effective

            if response.status_code == 304:
                self._publish(tenant_id, self._current_permissions(), self._version)
                return self._context.effective

            if not response.is_success:
                raise PermissionSyncError(
                    f"Failed to fetch permissions: {response.status_code}",
                    details={"tenant_id": tenant_id, "status_code": response.status_code},
                )

            data = PermissionSyncResponse.model_validate(response.json())
        except PermissionSyncError as e:
            await self._fallback(tenant_id, e)
            return self._context.effective
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            error = PermissionSyncError(
                f"Failed to fetch permissions: {e}",
                details={"tenant_id": tenant_id, "error_type": type(e).__name__},
            )
            await self._fallback(tenant_id, error)
            return self._context.effective

        if self._context.tenant_id != tenant_id:
            return self._context.effective

        self._last_error = None
        self._version = data.version
        new_etag = response.headers.get(HttpHeaders.ETAG)
        if new_etag:
            self._etag = new_etag

        self._publish(tenant_id, data.permissions, data.version)
        if self._cache is not None:
            await self._cache.set(tenant_id, data.permissions, data.version)
        logger.info(f"Synced {len(data.permissions)} permissions for tenant {tenant_id} (version {data.version})")
        return self._context.effective

    async def refresh(self) -> EffectivePermissions:
        """Force a full refresh, ignoring the ETag and the debounce window."""
        self._etag = None
        self._last_fetch = None
        tenant_id = self._context.tenant_id
        if tenant_id:
            self._context.apply_snapshot(
                PermissionSnapshot.loading(tenant_id, self._current_permissions(), self._version)
            )
        return await self.fetch(force=True)

    async def mark_stale(self) -> EffectivePermissions:
        """Permissions changed server-side; refresh now."""
        logger.info(f"Permissions marked stale for tenant {self._context.tenant_id}, refreshing")
        return await self.refresh()

    async def handle_forbidden(self) -> EffectivePermissions:
        """An API call was refused; resync if the debounce window allows."""
        return await self.fetch()

    async def handle_resume(self, hidden_for: float) -> Optional[EffectivePermissions]:
        """The page became visible again after ``hidden_for`` seconds."""
        if not self._context.tenant_id or hidden_for < self._settings.min_hidden_duration:
            return None
        logger.debug(f"Page was hidden for {hidden_for:.0f}s, syncing permissions")
        return await self.fetch()

    async def inspect_response(self, response: httpx.Response) -> bool:
        """Check an API response for permission change signals.

        Returns:
            True if a refresh or resync was triggered
        """
        if response.headers.get(HttpHeaders.PERMISSION_STALE, "").lower() == "true":
            await self.mark_stale()
            return True
        if response.status_code == 403:
            await self.handle_forbidden()
            return True
        return False

    async def run_polling(self, stop_event: asyncio.Event) -> None:
        """Fetch every ``poll_interval`` seconds until ``stop_event`` is set."""
        interval = self._settings.poll_interval
        logger.debug(f"Permission polling started (every {interval}s)")
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                await self.fetch()
        logger.debug("Permission polling stopped")

    def _current_permissions(self):
        snapshot = self._context.snapshot
        return snapshot.permissions if snapshot is not None else frozenset()

    def _publish(self, tenant_id: str, permissions, version: int, error: Optional[str] = None) -> None:
        self._context.apply_snapshot(
            PermissionSnapshot(tenant_id=tenant_id, permissions=permissions, version=version, error=error)
        )

    async def _fallback(self, tenant_id: str, error: PermissionSyncError) -> None:
        logger.error(f"Permission sync failed for tenant {tenant_id}: {error.message}")
        self._last_error = error

        stored = await self._cache.get(tenant_id) if self._cache is not None else None
        if self._context.tenant_id != tenant_id:
            return
        if stored is not None:
            self._version = stored.version
            self._publish(tenant_id, stored.permissions, stored.version, error=error.message)
        else:
            self._publish(tenant_id, self._current_permissions(), self._version, error=error.message)

"""
Module licensing service.

Fetches the modules licensed to the active tenant. Never raises: a missing
endpoint (404) returns empty data silently, any other failure is logged and
also returns empty data, which the navigation filter treats as "no data"
(fail open) and the route guard as "not licensed" (fail closed).
"""

import logging
import time
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from ....config.constants import HttpHeaders
from ....config.settings import RbacSettings, get_settings
from ....core.exceptions import ModuleLicensingError
from ..entities.modules import TenantModules
from ..models.responses import TenantModulesResponse

logger = logging.getLogger(__name__)


class ModuleLicensingService:
    """Fetches and briefly caches the tenant's licensed modules."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Optional[RbacSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._http = http_client
        self._settings = settings or get_settings()
        self._clock = clock
        self._cached: Optional[TenantModules] = None
        self._fetched_at: Optional[float] = None
        self._last_error: Optional[ModuleLicensingError] = None
        self._tenant_id: Optional[str] = None

    @property
    def tenant_id(self) -> Optional[str]:
        return self._tenant_id

    @property
    def last_error(self) -> Optional[ModuleLicensingError]:
        return self._last_error

    def invalidate(self) -> None:
        """Drop the cached result (e.g. after a tenant switch)."""
        self._cached = None
        self._fetched_at = None

    async def get_tenant_modules(self, tenant_id: Optional[str] = None, force: bool = False) -> TenantModules:
        """Get licensed modules, reusing a result younger than ``modules_cache_ttl``.

        A result is only reused for the tenant it was fetched for; passing a
        different ``tenant_id`` drops the cached result first.
        """
        if tenant_id != self._tenant_id:
            self.invalidate()
            self._tenant_id = tenant_id

        now = self._clock()
        if (
            not force
            and self._cached is not None
            and self._fetched_at is not None
            and now - self._fetched_at < self._settings.modules_cache_ttl
        ):
            return self._cached

        modules = await self._fetch(tenant_id)
        if tenant_id == self._tenant_id:
            self._cached = modules
            self._fetched_at = now
        return modules

    async def _fetch(self, tenant_id: Optional[str]) -> TenantModules:
        path = self._settings.modules_path
        headers = {HttpHeaders.TENANT_ID: tenant_id} if tenant_id else None
        try:
            response = await self._http.get(path, headers=headers)
            if response.status_code == 404:
                logger.debug(f"Modules endpoint {path} not found, using empty module data")
                self._last_error = None
                return TenantModules.empty()

            if not response.is_success:
                raise ModuleLicensingError(
                    f"Failed to fetch tenant modules: {response.status_code}",
                    details={"status_code": response.status_code},
                )

            modules = TenantModulesResponse.model_validate(response.json()).to_entity()
        except ModuleLicensingError as e:
            return self._fail(e)
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            return self._fail(
                ModuleLicensingError(
                    f"Failed to fetch tenant modules: {e}",
                    details={"error_type": type(e).__name__},
                )
            )

        self._last_error = None
        logger.debug(f"Loaded {len(modules.module_ids)} licensed modules")
        return modules

    def _fail(self, error: ModuleLicensingError) -> TenantModules:
        logger.warning(error.message)
        self._last_error = error
        return TenantModules.empty()

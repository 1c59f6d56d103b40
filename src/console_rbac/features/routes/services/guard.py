"""FastAPI route guard dependency."""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from fastapi import HTTPException, Request

from ....core.exceptions import AccessDeniedError, get_http_status_code
from ...navigation.entities.modules import TenantModules
from ...permissions.entities.protocols import AccessDecisionProtocol
from ..entities.route_config import RouteAccessResult, RoutePermissionConfig
from .route_permissions import ensure_route_access

logger = logging.getLogger(__name__)

AccessProvider = Callable[[Request], Union[AccessDecisionProtocol, Awaitable[AccessDecisionProtocol]]]
ModulesProvider = Callable[[Request], Union[Optional[TenantModules], Awaitable[Optional[TenantModules]]]]


class RouteAccessDenied(HTTPException):
    """HTTP error raised by the route guard; ``detail`` carries the denial reason."""

    def __init__(self, error: AccessDeniedError):
        super().__init__(status_code=get_http_status_code(error), detail=error.details)
        self.error = error


async def _resolve(provider: Callable[[Request], Any], request: Request) -> Any:
    value = provider(request)
    if inspect.isawaitable(value):
        value = await value
    return value


class RouteGuard:
    """Guards requests by the route permission map.

    Usable as ``Depends(guard)`` on a router or app. Providers receive the
    request and return (directly or awaitably) the current access decisions
    and the tenant's licensed modules.
    """

    def __init__(
        self,
        access_provider: AccessProvider,
        modules_provider: Optional[ModulesProvider] = None,
        routes: Optional[Dict[str, RoutePermissionConfig]] = None,
    ):
        self.access_provider = access_provider
        self.modules_provider = modules_provider
        self.routes = routes

    async def __call__(self, request: Request) -> RouteAccessResult:
        access = await _resolve(self.access_provider, request)
        modules = None
        if self.modules_provider is not None:
            modules = await _resolve(self.modules_provider, request)

        try:
            return ensure_route_access(request.url.path, access, modules, self.routes)
        except AccessDeniedError as e:
            logger.warning(f"Access denied to {request.url.path}: {e.details.get('reason')}")
            raise RouteAccessDenied(e)

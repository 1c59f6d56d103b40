"""HTTP client factory for the console API."""

from typing import Optional

import httpx

from ..config.settings import RbacSettings, get_settings


def create_api_client(settings: Optional[RbacSettings] = None, **kwargs) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` pointed at the console API.

    Extra keyword arguments (cookies, headers, transport) are passed through.
    The caller owns the client and must close it.
    """
    settings = settings or get_settings()
    kwargs.setdefault("timeout", settings.request_timeout)
    return httpx.AsyncClient(base_url=settings.api_base_url, **kwargs)

"""Tests for the permission sync service."""

import asyncio

import httpx
import pytest

from console_rbac.config.settings import RbacSettings
from console_rbac.core.exceptions import PermissionSyncError
from console_rbac.features.permissions.entities.snapshot import SessionClaims
from console_rbac.features.permissions.repositories.permission_cache import InMemoryPermissionCache
from console_rbac.features.permissions.services.resolver import PermissionContext
from console_rbac.features.permissions.services.sync_service import PermissionSyncService

SYNC_PATH = "/api/v1/me/permissions/sync"


class FakeSyncApi:
    """Scripted permission sync endpoint for ``httpx.MockTransport``."""

    def __init__(self):
        self.requests = []
        self.responses = []
        self.on_request = None

    def reply(self, status_code=200, json=None, headers=None):
        self.responses.append(httpx.Response(status_code, json=json, headers=headers))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if not self.responses:
            raise httpx.ConnectError("no scripted response", request=request)
        return self.responses.pop(0)


@pytest.fixture
def api():
    return FakeSyncApi()


@pytest.fixture
def http_client(api, settings):
    return httpx.AsyncClient(base_url=settings.api_base_url, transport=httpx.MockTransport(api))


@pytest.fixture
def context():
    return PermissionContext(claims=SessionClaims(tenant_id="tenant-a", permissions=["claims:read"]))


@pytest.fixture
def cache(clock):
    return InMemoryPermissionCache(clock=clock)


@pytest.fixture
def service(http_client, context, cache, settings, clock):
    return PermissionSyncService(http_client, context, cache=cache, settings=settings, clock=clock)


class TestFetch:
    """Test permission fetches."""

    @pytest.mark.asyncio
    async def test_fetch_publishes_and_caches(self, service, api, context, cache):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["assets:read"], "version": 3}, headers={"ETag": '"v3"'})

        effective = await service.fetch()

        assert effective.permissions == {"assets:read"}
        assert effective.is_loading is False
        assert service.etag == '"v3"'
        assert service.version == 3
        assert api.requests[0].url.path == SYNC_PATH
        assert api.requests[0].headers["X-Tenant-ID"] == "tenant-a"
        assert (await cache.get("tenant-a")).permissions == ["assets:read"]

    @pytest.mark.asyncio
    async def test_conditional_request_and_not_modified(self, service, api, clock):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["assets:read"], "version": 3}, headers={"ETag": '"v3"'})
        await service.fetch()

        clock.advance(10)
        api.reply(status_code=304)
        effective = await service.fetch()

        assert api.requests[1].headers["If-None-Match"] == '"v3"'
        assert effective.permissions == {"assets:read"}
        assert effective.is_loading is False

    @pytest.mark.asyncio
    async def test_fetch_is_debounced(self, service, api, clock):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["assets:read"], "version": 1})
        await service.fetch()

        clock.advance(2)
        await service.fetch()

        assert len(api.requests) == 1

    @pytest.mark.asyncio
    async def test_server_error_falls_back_to_cache(self, service, api, cache, context):
        await cache.set("tenant-a", ["cached:read"], 2)
        await service.switch_tenant("tenant-a")
        api.reply(status_code=500)

        effective = await service.fetch()

        assert effective.permissions == {"cached:read"}
        assert effective.is_loading is False
        assert isinstance(service.last_error, PermissionSyncError)
        assert service.last_error.details["status_code"] == 500
        assert context.snapshot.error == service.last_error.message

    @pytest.mark.asyncio
    async def test_transport_error_without_cache_keeps_current(self, http_client, context, settings, clock):
        service = PermissionSyncService(http_client, context, settings=settings, clock=clock)
        await service.switch_tenant("tenant-a")

        effective = await service.fetch()

        assert effective.permissions == frozenset()
        assert effective.is_loading is False
        assert service.last_error.details["error_type"] == "ConnectError"

    @pytest.mark.asyncio
    async def test_invalid_body_is_a_sync_error(self, service, api):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": "not-a-list"})

        await service.fetch()

        assert isinstance(service.last_error, PermissionSyncError)

    @pytest.mark.asyncio
    async def test_response_for_previous_tenant_is_discarded(self, service, api, context):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["assets:read"], "version": 1})
        api.on_request = lambda request: context.set_tenant("tenant-b")

        await service.fetch()

        assert context.tenant_id == "tenant-b"
        assert context.snapshot.is_loading is True
        assert context.effective.permissions == frozenset()

    @pytest.mark.asyncio
    async def test_fetch_without_tenant_delivers_empty(self, service, api, context):
        effective = await service.fetch()

        assert effective.permissions == frozenset()
        assert api.requests == []


class TestTenantSwitch:
    """Test tenant selection and bootstrap data."""

    @pytest.mark.asyncio
    async def test_switch_shows_cached_permissions_while_loading(self, service, cache, context):
        await cache.set("tenant-b", ["cached:read"], 9)

        await service.switch_tenant("tenant-b")

        assert context.effective.permissions == {"cached:read"}
        assert context.effective.is_loading is True
        assert service.version == 9

    @pytest.mark.asyncio
    async def test_switch_resets_etag(self, service, api):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["a:read"], "version": 1}, headers={"ETag": '"v1"'})
        await service.fetch()

        await service.switch_tenant("tenant-b")

        assert service.etag is None

    @pytest.mark.asyncio
    async def test_blank_tenant_is_rejected(self, service):
        with pytest.raises(ValueError):
            await service.switch_tenant("   ")

    @pytest.mark.asyncio
    async def test_bootstrap_delivers_without_request(self, service, api, cache, context):
        await service.switch_tenant("tenant-a")

        assert await service.apply_bootstrap("tenant-a", ["assets:read"], version=4) is True

        assert context.effective.permissions == {"assets:read"}
        assert context.effective.is_loading is False
        assert (await cache.get("tenant-a")).version == 4
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_bootstrap_for_other_tenant_is_ignored(self, service, context):
        await service.switch_tenant("tenant-a")

        assert await service.apply_bootstrap("tenant-b", ["assets:read"]) is False
        assert context.effective.permissions == {"claims:read"}


class TestChangeSignals:
    """Test stale, forbidden and resume triggers."""

    @pytest.mark.asyncio
    async def test_stale_header_forces_refresh(self, service, api):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["assets:read"], "version": 1}, headers={"ETag": '"v1"'})
        await service.fetch()

        api.reply(json={"permissions": ["assets:read", "assets:write"], "version": 2})
        triggered = await service.inspect_response(httpx.Response(200, headers={"X-Permission-Stale": "true"}))

        assert triggered is True
        assert len(api.requests) == 2
        assert "If-None-Match" not in api.requests[1].headers
        assert service.context.effective.permissions == {"assets:read", "assets:write"}

    @pytest.mark.asyncio
    async def test_forbidden_only_fetches_outside_debounce(self, service, api, clock):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["assets:read"], "version": 1})
        await service.fetch()

        assert await service.inspect_response(httpx.Response(403)) is True
        assert len(api.requests) == 1

        clock.advance(6)
        api.reply(json={"permissions": ["assets:read"], "version": 1})
        await service.handle_forbidden()
        assert len(api.requests) == 2

    @pytest.mark.asyncio
    async def test_plain_response_triggers_nothing(self, service):
        assert await service.inspect_response(httpx.Response(200)) is False

    @pytest.mark.asyncio
    async def test_resume_after_short_hide_does_nothing(self, service, api):
        await service.switch_tenant("tenant-a")

        assert await service.handle_resume(hidden_for=5) is None
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_resume_after_long_hide_fetches(self, service, api):
        await service.switch_tenant("tenant-a")
        api.reply(json={"permissions": ["assets:read"], "version": 1})

        effective = await service.handle_resume(hidden_for=45)

        assert effective.permissions == {"assets:read"}


class TestPolling:
    """Test the polling loop."""

    @pytest.mark.asyncio
    async def test_polling_fetches_until_stopped(self, http_client, context, api):
        settings = RbacSettings(poll_interval=0.01, min_fetch_interval=0, _env_file=None)
        service = PermissionSyncService(http_client, context, settings=settings)
        await service.switch_tenant("tenant-a")
        for _ in range(50):
            api.reply(json={"permissions": ["assets:read"], "version": 1})

        stop = asyncio.Event()
        task = asyncio.create_task(service.run_polling(stop))
        await asyncio.sleep(0.05)
        stop.set()
        await asyncio.wait_for(task, timeout=1)

        assert len(api.requests) >= 1
        assert context.effective.permissions == {"assets:read"}

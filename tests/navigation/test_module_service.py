"""Tests for module licensing models and service."""

import httpx
import pytest

from console_rbac.core.exceptions import ModuleLicensingError
from console_rbac.features.navigation.entities.modules import ReleaseStatus
from console_rbac.features.navigation.models.responses import TenantModulesResponse
from console_rbac.features.navigation.services.module_service import ModuleLicensingService

MODULES_BODY = {
    "module_ids": ["assets", "findings"],
    "modules": [
        {"id": "assets", "slug": "assets", "name": "Assets", "release_status": "released"},
        {"id": "threat_intel", "slug": "threat-intel", "name": "Threat Intel", "release_status": "beta"},
        {"id": "ai", "slug": "ai", "name": "AI", "release_status": "coming_soon"},
        {"id": "legacy", "slug": "legacy", "name": "Legacy", "release_status": "someday", "is_active": False},
    ],
    "sub_modules": {"assets": [{"id": "assets.cloud", "slug": "cloud", "parent_module_id": "assets"}]},
    "event_types": [{"id": "asset.created"}, "finding.created"],
    "coming_soon_module_ids": None,
    "beta_module_ids": ["threat_intel"],
    "unexpected": "ignored",
}


class TestTenantModulesResponse:
    """Test parsing of the modules endpoint body."""

    def test_to_entity(self):
        modules = TenantModulesResponse.model_validate(MODULES_BODY).to_entity()

        assert modules.module_ids == {"assets", "findings"}
        assert modules.release_status("assets") is ReleaseStatus.STABLE
        assert modules.release_status("threat-intel") is ReleaseStatus.BETA
        assert modules.release_status("ai") is ReleaseStatus.PREVIEW
        assert modules.release_status("legacy") is None
        assert modules.is_module_active("legacy") is False
        assert modules.sub_modules["assets"][0].parent_module_id == "assets"
        assert modules.event_types == ("asset.created", "finding.created")
        assert modules.coming_soon_module_ids == frozenset()

    def test_empty_body(self):
        modules = TenantModulesResponse.model_validate({}).to_entity()

        assert modules.has_data is False
        assert modules.has_module("anything") is True
        assert modules.has_module_strict("anything") is False


def make_service(handler, settings, clock):
    client = httpx.AsyncClient(base_url=settings.api_base_url, transport=httpx.MockTransport(handler))
    return ModuleLicensingService(client, settings=settings, clock=clock)


class TestModuleLicensingService:
    """Test fetching licensed modules."""

    @pytest.mark.asyncio
    async def test_fetch_and_dedupe(self, settings, clock):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=MODULES_BODY)

        service = make_service(handler, settings, clock)

        first = await service.get_tenant_modules()
        clock.advance(30)
        second = await service.get_tenant_modules()

        assert first.module_ids == {"assets", "findings"}
        assert second is first
        assert len(calls) == 1
        assert calls[0].url.path == "/api/v1/me/modules"

    @pytest.mark.asyncio
    async def test_refetch_after_ttl_or_force(self, settings, clock):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=MODULES_BODY)

        service = make_service(handler, settings, clock)

        await service.get_tenant_modules()
        clock.advance(61)
        await service.get_tenant_modules()
        await service.get_tenant_modules(force=True)
        service.invalidate()
        await service.get_tenant_modules()

        assert len(calls) == 4

    @pytest.mark.asyncio
    async def test_tenant_switch_refetches_with_tenant_header(self, settings, clock):
        calls = []

        def handler(request):
            calls.append(request)
            ids = ["assets"] if request.headers.get("X-Tenant-ID") == "tenant-a" else ["reports"]
            return httpx.Response(200, json={"module_ids": ids})

        service = make_service(handler, settings, clock)

        first = await service.get_tenant_modules("tenant-a")
        second = await service.get_tenant_modules("tenant-b")
        third = await service.get_tenant_modules("tenant-b")

        assert first.module_ids == {"assets"}
        assert second.module_ids == {"reports"}
        assert third is second
        assert service.tenant_id == "tenant-b"
        assert [c.headers["X-Tenant-ID"] for c in calls] == ["tenant-a", "tenant-b"]

    @pytest.mark.asyncio
    async def test_missing_endpoint_is_silent(self, settings, clock):
        service = make_service(lambda request: httpx.Response(404), settings, clock)

        modules = await service.get_tenant_modules()

        assert modules.has_data is False
        assert service.last_error is None

    @pytest.mark.asyncio
    async def test_server_error_returns_empty(self, settings, clock):
        service = make_service(lambda request: httpx.Response(503), settings, clock)

        modules = await service.get_tenant_modules()

        assert modules.has_data is False
        assert isinstance(service.last_error, ModuleLicensingError)
        assert service.last_error.details == {"status_code": 503}

    @pytest.mark.asyncio
    async def test_transport_error_returns_empty(self, settings, clock):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        service = make_service(handler, settings, clock)

        modules = await service.get_tenant_modules()

        assert modules.has_data is False
        assert service.last_error.details["error_type"] == "ConnectTimeout"

    @pytest.mark.asyncio
    async def test_malformed_body_returns_empty(self, settings, clock):
        service = make_service(lambda request: httpx.Response(200, json={"module_ids": "assets"}), settings, clock)

        modules = await service.get_tenant_modules()

        assert modules.has_data is False
        assert service.last_error is not None

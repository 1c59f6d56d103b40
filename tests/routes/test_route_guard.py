"""Tests for the FastAPI route guard."""

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from console_rbac.features.navigation.entities.modules import TenantModules
from console_rbac.features.permissions.entities.catalog import Permission
from console_rbac.features.permissions.services.access import AccessDecisions
from console_rbac.features.routes.services.guard import RouteGuard


def access_from_headers(request: Request) -> AccessDecisions:
    permissions = request.headers.get("X-Test-Permissions", "")
    return AccessDecisions(permissions=frozenset(p for p in permissions.split(",") if p))


async def modules_from_headers(request: Request) -> TenantModules:
    modules = request.headers.get("X-Test-Modules", "")
    return TenantModules.from_ids(m for m in modules.split(",") if m)


@pytest.fixture
def client():
    app = FastAPI(dependencies=[Depends(RouteGuard(access_from_headers, modules_from_headers))])

    @app.get("/scans")
    async def scans():
        return {"page": "scans"}

    @app.get("/settings/billing")
    async def billing():
        return {"page": "billing"}

    @app.get("/profile")
    async def profile():
        return {"page": "profile"}

    return TestClient(app)


class TestRouteGuard:
    """Test guarded requests."""

    def test_allowed(self, client):
        response = client.get(
            "/scans",
            headers={"X-Test-Permissions": Permission.SCANS_READ.value, "X-Test-Modules": "scans"},
        )

        assert response.status_code == 200
        assert response.json() == {"page": "scans"}

    def test_unmapped_route_allowed(self, client):
        assert client.get("/profile").status_code == 200

    def test_module_denied(self, client):
        response = client.get("/scans", headers={"X-Test-Permissions": Permission.SCANS_READ.value})

        assert response.status_code == 403
        assert response.json()["detail"] == {
            "reason": "module",
            "permission": Permission.SCANS_READ.value,
            "module": "scans",
            "message": None,
        }

    def test_permission_denied(self, client):
        response = client.get("/settings/billing")

        assert response.status_code == 403
        assert response.json()["detail"]["reason"] == "permission"
        assert response.json()["detail"]["permission"] == Permission.BILLING_READ.value

    def test_sync_modules_provider_and_no_modules(self):
        guard = RouteGuard(lambda request: AccessDecisions(permissions=frozenset({"settings:billing:read"})))
        app = FastAPI()

        @app.get("/settings/billing", dependencies=[Depends(guard)])
        def billing():
            return {"ok": True}

        assert TestClient(app).get("/settings/billing").status_code == 200

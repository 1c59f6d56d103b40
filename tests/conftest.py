"""Pytest configuration and fixtures for console-rbac tests."""

import pytest

from console_rbac.config.settings import RbacSettings, get_settings
from console_rbac.features.navigation.entities.modules import (
    LicensingModule,
    ReleaseStatus,
    TenantModules,
)
from console_rbac.features.permissions.entities.catalog import Permission
from console_rbac.features.permissions.entities.roles import Role
from console_rbac.features.permissions.services.access import AccessDecisions


class FakeClock:
    """Manually advanced clock for debounce and TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are lru_cached; keep environment overrides test-local."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings with the production defaults and a test API base URL."""
    return RbacSettings(api_base_url="http://console.test", _env_file=None)


@pytest.fixture
def member_access():
    """A member with read access to assets and findings."""
    return AccessDecisions(
        permissions=frozenset({
            Permission.DASHBOARD_READ.value,
            Permission.ASSETS_READ.value,
            Permission.FINDINGS_READ.value,
        }),
        tenant_role=Role.MEMBER.value,
        tenant_id="tenant-a",
    )


@pytest.fixture
def viewer_access():
    """A viewer with dashboard access only."""
    return AccessDecisions(
        permissions=frozenset({Permission.DASHBOARD_READ.value}),
        tenant_role=Role.VIEWER.value,
        tenant_id="tenant-a",
    )


@pytest.fixture
def loading_access():
    """Permissions still loading, no role resolved yet."""
    return AccessDecisions(is_loading=True)


@pytest.fixture
def licensed_modules():
    """Tenant licensed for assets and findings; threat intel in beta."""
    return TenantModules(
        module_ids=frozenset({"assets", "findings"}),
        modules=(
            LicensingModule(id="assets", slug="assets", name="Assets", release_status=ReleaseStatus.STABLE),
            LicensingModule(id="findings", slug="findings", name="Findings", release_status=ReleaseStatus.STABLE),
            LicensingModule(id="threat_intel", slug="threat-intel", name="Threat Intel", release_status=ReleaseStatus.BETA),
            LicensingModule(id="reports", slug="reports", name="Reports", is_active=False),
        ),
    )

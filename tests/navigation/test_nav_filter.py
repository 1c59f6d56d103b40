"""Tests for the navigation filter."""

import pytest

from console_rbac.features.navigation.entities.modules import (
    LicensingModule,
    ReleaseStatus,
    TenantModules,
)
from console_rbac.features.navigation.entities.nav_item import NavGroup, NavItem
from console_rbac.features.navigation.services.filter import (
    filter_nav_item,
    filter_navigation,
    has_item_access,
)
from console_rbac.features.permissions.entities.catalog import Permission
from console_rbac.features.permissions.entities.roles import Role
from console_rbac.features.permissions.services.access import AccessDecisions


def titles(groups):
    return [[item.title for item in group.items] for group in groups]


@pytest.fixture
def navigation():
    return [
        NavGroup("Overview", [
            NavItem("Dashboard", "/", permission=Permission.DASHBOARD_READ),
        ]),
        NavGroup("Discovery", [
            NavItem("Assets", "/assets", module="assets", permission=Permission.ASSETS_READ),
            NavItem("Threat Intel", "/threat-intel", module="threat_intel", permission=Permission.VULNERABILITIES_READ),
            NavItem("Reports", "/reports", module="reports", permission=Permission.REPORTS_READ),
        ]),
        NavGroup("Settings", [
            NavItem("Organization", items=[
                NavItem("Users", "/settings/users", permission=Permission.MEMBERS_READ),
                NavItem("Billing", "/settings/billing", min_role=Role.ADMIN),
            ]),
            NavItem("Danger Zone", "/settings/danger", role=Role.OWNER),
        ]),
    ]


class TestModuleAxis:
    """Test module licensing checks."""

    def test_beta_module_shown_without_licence(self, licensed_modules):
        access = AccessDecisions(permissions=frozenset({Permission.VULNERABILITIES_READ.value}))
        item = NavItem("Threat Intel", module="threat_intel", permission=Permission.VULNERABILITIES_READ)

        result = filter_nav_item(item, access, licensed_modules)

        assert result is not None
        assert result.release_status is ReleaseStatus.BETA

    def test_unlicensed_module_hidden(self, licensed_modules):
        access = AccessDecisions(permissions=frozenset({"scans:read"}))
        item = NavItem("Scans", module="scans", permission="scans:read")

        assert filter_nav_item(item, access, licensed_modules) is None

    def test_inactive_module_hidden_even_if_licensed(self):
        modules = TenantModules(
            module_ids=frozenset({"reports"}),
            modules=(LicensingModule(id="reports", is_active=False),),
        )
        access = AccessDecisions(permissions=frozenset({"reports:read"}))

        assert filter_nav_item(NavItem("Reports", module="reports"), access, modules) is None

    def test_disabled_release_status_hidden(self):
        modules = TenantModules(
            module_ids=frozenset({"pentest"}),
            modules=(LicensingModule(id="pentest", release_status=ReleaseStatus.DISABLED),),
        )

        assert filter_nav_item(NavItem("Pentest", module="pentest"), AccessDecisions(), modules) is None

    def test_no_licensing_data_fails_open(self):
        item = NavItem("Anything", module="y")

        assert filter_nav_item(item, AccessDecisions(), TenantModules.empty()) is not None

    def test_coming_soon_ids_are_discoverable(self):
        modules = TenantModules(module_ids=frozenset({"assets"}), coming_soon_module_ids=frozenset({"ai"}))

        result = filter_nav_item(NavItem("AI", module="ai"), AccessDecisions(), modules)

        assert result.release_status is ReleaseStatus.PREVIEW


class TestRoleAndPermissionAxes:
    """Test role and permission checks."""

    def test_min_role(self):
        item = NavItem("Billing", min_role="admin")

        assert has_item_access(item, AccessDecisions(tenant_role="owner"), TenantModules.empty()) is True
        assert has_item_access(item, AccessDecisions(tenant_role="member"), TenantModules.empty()) is False
        assert has_item_access(item, AccessDecisions(), TenantModules.empty()) is False

    def test_exact_role(self):
        item = NavItem("Owner only", role=["owner"])

        assert has_item_access(item, AccessDecisions(tenant_role="owner"), TenantModules.empty()) is True
        assert has_item_access(item, AccessDecisions(tenant_role="admin"), TenantModules.empty()) is False

    def test_permission_list_means_any(self):
        item = NavItem("Either", permission=["assets:read", "scans:read"])

        assert has_item_access(item, AccessDecisions(permissions=frozenset({"scans:read"})), TenantModules.empty())

    def test_empty_permission_or_role_list_hides_item(self):
        access = AccessDecisions(permissions=frozenset({"assets:read"}), tenant_role="owner")
        groups = [NavGroup("Misc", [
            NavItem("No permissions", "/a", permission=[]),
            NavItem("No roles", "/b", role=[]),
        ])]

        assert filter_navigation(groups, access) == []

    def test_nav_item_with_extra_is_hashable(self):
        item = NavItem("Assets", "/assets", extra={"badge": 3})

        assert hash(item) == hash(NavItem("Assets", "/assets", extra={"badge": 5}))

    def test_all_axes_must_pass(self, licensed_modules):
        item = NavItem("Assets", module="assets", permission="assets:write", min_role="member")
        access = AccessDecisions(permissions=frozenset({"assets:read"}), tenant_role="owner")

        assert has_item_access(item, access, licensed_modules) is False


class TestFilterNavigation:
    """Test whole-tree filtering."""

    def test_member_view(self, navigation, member_access, licensed_modules):
        result = filter_navigation(navigation, member_access, licensed_modules)

        assert titles(result) == [["Dashboard"], ["Assets"]]

    def test_parent_without_visible_children_dropped(self):
        groups = [NavGroup("Settings", [
            NavItem("Organization", items=[
                NavItem("Users", permission="team:members:read"),
                NavItem("Roles", permission="team:roles:read"),
            ]),
            NavItem("Dashboard", permission="dashboard:read"),
        ])]
        access = AccessDecisions(permissions=frozenset({"dashboard:read"}))

        assert titles(filter_navigation(groups, access)) == [["Dashboard"]]

    def test_children_filtered_individually(self, navigation):
        access = AccessDecisions(
            permissions=frozenset({Permission.MEMBERS_READ.value}),
            tenant_role="member",
        )

        result = filter_navigation(navigation, access)
        organization = result[0].items[0]

        assert organization.title == "Organization"
        assert [child.title for child in organization.items] == ["Users"]

    def test_children_inherit_parent_release_status(self):
        modules = TenantModules(
            module_ids=frozenset({"assets"}),
            modules=(LicensingModule(id="threat_intel", release_status=ReleaseStatus.BETA),),
        )
        groups = [NavGroup("Intel", [
            NavItem("Threat Intel", module="threat_intel", items=[
                NavItem("Feeds", "/threat-intel/feeds"),
            ]),
        ])]

        result = filter_navigation(groups, AccessDecisions(), modules)
        parent = result[0].items[0]

        assert parent.release_status is ReleaseStatus.BETA
        assert parent.items[0].release_status is ReleaseStatus.BETA

    def test_filter_is_idempotent(self, navigation, member_access, licensed_modules):
        first = filter_navigation(navigation, member_access, licensed_modules)
        second = filter_navigation(navigation, member_access, licensed_modules)
        again = filter_navigation(first, member_access, licensed_modules)

        assert first == second
        assert again == first

    def test_input_tree_is_not_modified(self, navigation, viewer_access):
        before = list(navigation)

        filter_navigation(navigation, viewer_access)

        assert navigation == before
        assert len(navigation[2].items[0].items) == 2

    def test_owner_sees_role_gated_items(self, navigation):
        access = AccessDecisions(permissions=frozenset({Permission.MEMBERS_READ.value}), tenant_role="owner")

        result = filter_navigation(navigation, access)

        assert titles(result) == [["Organization", "Danger Zone"]]
        assert [c.title for c in result[0].items[0].items] == ["Users", "Billing"]

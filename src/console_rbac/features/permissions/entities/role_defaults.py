"""
Role to permission default mapping. SEED / REFERENCE DATA ONLY.

Describes what each role would be granted by default, mirroring the backend
role mapping. It exists for tenant seeding, bootstrap fixtures and
documentation.

The effective permission resolver must never read this table: permissions
come from the live sync source or the session claims, nothing else. Nothing
under ``console_rbac.features.permissions.services`` imports this module.
"""

from typing import Dict, FrozenSet, List

from .catalog import Permission
from .roles import Role


_VIEWER: List[Permission] = [
    Permission.ASSETS_READ,
    Permission.PROJECTS_READ,
    Permission.COMPONENTS_READ,
    Permission.FINDINGS_READ,
    Permission.VULNERABILITIES_READ,
    Permission.DASHBOARD_READ,
    Permission.ASSET_GROUPS_READ,
    Permission.SCANS_READ,
    Permission.SCAN_PROFILES_READ,
    Permission.TOOLS_READ,
    Permission.TENANT_TOOLS_READ,
    Permission.SCANNER_TEMPLATES_READ,
    Permission.TEMPLATE_SOURCES_READ,
    Permission.SECRET_STORE_READ,
    Permission.CREDENTIALS_READ,
    Permission.REPORTS_READ,
    Permission.PENTEST_READ,
    Permission.REMEDIATION_READ,
    Permission.WORKFLOWS_READ,
    Permission.MEMBERS_READ,
    Permission.TEAM_READ,
    Permission.INTEGRATIONS_READ,
    Permission.GROUPS_READ,
    Permission.ROLES_READ,
    Permission.AGENTS_READ,
    Permission.SOURCES_READ,
    Permission.COMMANDS_READ,
    Permission.PIPELINES_READ,
]

# Read + write, no delete
_MEMBER: List[Permission] = [
    Permission.ASSETS_READ,
    Permission.ASSETS_WRITE,
    Permission.PROJECTS_READ,
    Permission.PROJECTS_WRITE,
    Permission.COMPONENTS_READ,
    Permission.COMPONENTS_WRITE,
    Permission.FINDINGS_READ,
    Permission.FINDINGS_WRITE,
    Permission.VULNERABILITIES_READ,
    Permission.DASHBOARD_READ,
    Permission.ASSET_GROUPS_READ,
    Permission.ASSET_GROUPS_WRITE,
    Permission.SCANS_READ,
    Permission.SCANS_WRITE,
    Permission.SCAN_PROFILES_READ,
    Permission.SCAN_PROFILES_WRITE,
    Permission.TOOLS_READ,
    Permission.TENANT_TOOLS_READ,
    Permission.TENANT_TOOLS_WRITE,
    Permission.SCANNER_TEMPLATES_READ,
    Permission.SCANNER_TEMPLATES_WRITE,
    Permission.TEMPLATE_SOURCES_READ,
    Permission.TEMPLATE_SOURCES_WRITE,
    Permission.SECRET_STORE_READ,
    Permission.CREDENTIALS_READ,
    Permission.REPORTS_READ,
    Permission.REPORTS_WRITE,
    Permission.PENTEST_READ,
    Permission.PENTEST_WRITE,
    Permission.REMEDIATION_READ,
    Permission.REMEDIATION_WRITE,
    Permission.WORKFLOWS_READ,
    Permission.MEMBERS_READ,
    Permission.TEAM_READ,
    Permission.INTEGRATIONS_READ,
    Permission.GROUPS_READ,
    Permission.ROLES_READ,
    Permission.AGENTS_READ,
    Permission.SCM_CONNECTIONS_READ,
    Permission.SOURCES_READ,
    Permission.SOURCES_WRITE,
    Permission.COMMANDS_READ,
    Permission.COMMANDS_WRITE,
    Permission.PIPELINES_READ,
]

# Everything an owner has except team deletion and billing management
_ADMIN: List[Permission] = [
    Permission.ASSETS_READ,
    Permission.ASSETS_WRITE,
    Permission.ASSETS_DELETE,
    Permission.PROJECTS_READ,
    Permission.PROJECTS_WRITE,
    Permission.PROJECTS_DELETE,
    Permission.COMPONENTS_READ,
    Permission.COMPONENTS_WRITE,
    Permission.COMPONENTS_DELETE,
    Permission.FINDINGS_READ,
    Permission.FINDINGS_WRITE,
    Permission.FINDINGS_DELETE,
    Permission.VULNERABILITIES_READ,
    Permission.DASHBOARD_READ,
    Permission.ASSET_GROUPS_READ,
    Permission.ASSET_GROUPS_WRITE,
    Permission.ASSET_GROUPS_DELETE,
    Permission.AUDIT_READ,
    Permission.SCANS_READ,
    Permission.SCANS_WRITE,
    Permission.SCANS_DELETE,
    Permission.SCAN_PROFILES_READ,
    Permission.SCAN_PROFILES_WRITE,
    Permission.SCAN_PROFILES_DELETE,
    Permission.TOOLS_READ,
    Permission.TOOLS_WRITE,
    Permission.TOOLS_DELETE,
    Permission.TENANT_TOOLS_READ,
    Permission.TENANT_TOOLS_WRITE,
    Permission.TENANT_TOOLS_DELETE,
    Permission.SCANNER_TEMPLATES_READ,
    Permission.SCANNER_TEMPLATES_WRITE,
    Permission.SCANNER_TEMPLATES_DELETE,
    Permission.TEMPLATE_SOURCES_READ,
    Permission.TEMPLATE_SOURCES_WRITE,
    Permission.TEMPLATE_SOURCES_DELETE,
    Permission.SECRET_STORE_READ,
    Permission.SECRET_STORE_WRITE,
    Permission.SECRET_STORE_DELETE,
    Permission.CREDENTIALS_READ,
    Permission.CREDENTIALS_WRITE,
    Permission.REPORTS_READ,
    Permission.REPORTS_WRITE,
    Permission.PENTEST_READ,
    Permission.PENTEST_WRITE,
    Permission.REMEDIATION_READ,
    Permission.REMEDIATION_WRITE,
    Permission.WORKFLOWS_READ,
    Permission.WORKFLOWS_WRITE,
    Permission.MEMBERS_READ,
    Permission.MEMBERS_INVITE,
    Permission.MEMBERS_MANAGE,
    Permission.TEAM_READ,
    Permission.TEAM_UPDATE,
    Permission.BILLING_READ,
    Permission.INTEGRATIONS_READ,
    Permission.INTEGRATIONS_MANAGE,
    Permission.GROUPS_READ,
    Permission.GROUPS_WRITE,
    Permission.GROUPS_DELETE,
    Permission.GROUPS_MEMBERS,
    Permission.GROUPS_PERMISSIONS,
    Permission.PERMISSION_SETS_READ,
    Permission.PERMISSION_SETS_WRITE,
    Permission.PERMISSION_SETS_DELETE,
    Permission.ROLES_READ,
    Permission.ROLES_WRITE,
    Permission.ROLES_DELETE,
    Permission.ROLES_ASSIGN,
    Permission.ASSIGNMENT_RULES_READ,
    Permission.ASSIGNMENT_RULES_WRITE,
    Permission.ASSIGNMENT_RULES_DELETE,
    Permission.AGENTS_READ,
    Permission.AGENTS_WRITE,
    Permission.AGENTS_DELETE,
    Permission.SCM_CONNECTIONS_READ,
    Permission.SCM_CONNECTIONS_WRITE,
    Permission.SCM_CONNECTIONS_DELETE,
    Permission.SOURCES_READ,
    Permission.SOURCES_WRITE,
    Permission.SOURCES_DELETE,
    Permission.COMMANDS_READ,
    Permission.COMMANDS_WRITE,
    Permission.COMMANDS_DELETE,
    Permission.PIPELINES_READ,
    Permission.PIPELINES_WRITE,
    Permission.PIPELINES_DELETE,
]

_OWNER: List[Permission] = _ADMIN + [
    Permission.TEAM_DELETE,
    Permission.BILLING_MANAGE,
]


ROLE_DEFAULT_PERMISSIONS: Dict[Role, List[Permission]] = {
    Role.OWNER: _OWNER,
    Role.ADMIN: _ADMIN,
    Role.MEMBER: _MEMBER,
    Role.VIEWER: _VIEWER,
}


def get_role_default_permissions(role: str) -> FrozenSet[str]:
    """Distinct permission identifiers a role is seeded with (empty if unknown)."""
    try:
        defaults = ROLE_DEFAULT_PERMISSIONS[Role(role)]
    except ValueError:
        return frozenset()
    return frozenset(p.value for p in defaults)

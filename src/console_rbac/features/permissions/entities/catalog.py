"""
Permission catalog.

Every permission identifier the console recognizes, mirroring the backend
definitions. Identifiers follow the hierarchical pattern
``{module}[:{subfeature}]:{action}``, for example:

- ``dashboard:read``
- ``assets:groups:write`` (manage asset groups)
- ``team:roles:assign`` (assign roles to users)

Identifiers are opaque keys everywhere except in ``get_permission_label``.
Legacy names are kept as enum aliases: they share the value of their canonical
member, so ``Permission.MEMBERS_MANAGE is Permission.MEMBERS_WRITE``.
"""

import logging
from enum import Enum
from typing import Any, Dict, FrozenSet, List

logger = logging.getLogger(__name__)


class Permission(str, Enum):
    """Permission identifiers known to the console."""

    # Core
    DASHBOARD_READ = "dashboard:read"
    AUDIT_READ = "audit:read"

    # Assets
    ASSETS_READ = "assets:read"
    ASSETS_WRITE = "assets:write"
    ASSETS_DELETE = "assets:delete"
    ASSET_GROUPS_READ = "assets:groups:read"
    ASSET_GROUPS_WRITE = "assets:groups:write"
    ASSET_GROUPS_DELETE = "assets:groups:delete"
    COMPONENTS_READ = "assets:components:read"
    COMPONENTS_WRITE = "assets:components:write"
    COMPONENTS_DELETE = "assets:components:delete"

    # Findings
    FINDINGS_READ = "findings:read"
    FINDINGS_WRITE = "findings:write"
    FINDINGS_DELETE = "findings:delete"
    VULNERABILITIES_READ = "findings:vulnerabilities:read"
    VULNERABILITIES_WRITE = "findings:vulnerabilities:write"
    VULNERABILITIES_DELETE = "findings:vulnerabilities:delete"
    CREDENTIALS_READ = "findings:credentials:read"
    CREDENTIALS_WRITE = "findings:credentials:write"
    REMEDIATION_READ = "findings:remediation:read"
    REMEDIATION_WRITE = "findings:remediation:write"
    WORKFLOWS_READ = "findings:workflows:read"
    WORKFLOWS_WRITE = "findings:workflows:write"
    POLICIES_READ = "findings:policies:read"
    POLICIES_WRITE = "findings:policies:write"
    POLICIES_DELETE = "findings:policies:delete"

    # Scans
    SCANS_READ = "scans:read"
    SCANS_WRITE = "scans:write"
    SCANS_DELETE = "scans:delete"
    SCANS_EXECUTE = "scans:execute"
    SCAN_PROFILES_READ = "scans:profiles:read"
    SCAN_PROFILES_WRITE = "scans:profiles:write"
    SCAN_PROFILES_DELETE = "scans:profiles:delete"
    SOURCES_READ = "scans:sources:read"
    SOURCES_WRITE = "scans:sources:write"
    SOURCES_DELETE = "scans:sources:delete"
    TOOLS_READ = "scans:tools:read"
    TOOLS_WRITE = "scans:tools:write"
    TOOLS_DELETE = "scans:tools:delete"
    TENANT_TOOLS_READ = "scans:tenant_tools:read"
    TENANT_TOOLS_WRITE = "scans:tenant_tools:write"
    TENANT_TOOLS_DELETE = "scans:tenant_tools:delete"
    SCANNER_TEMPLATES_READ = "scans:templates:read"
    SCANNER_TEMPLATES_WRITE = "scans:templates:write"
    SCANNER_TEMPLATES_DELETE = "scans:templates:delete"
    SECRET_STORE_READ = "scans:secret_store:read"
    SECRET_STORE_WRITE = "scans:secret_store:write"
    SECRET_STORE_DELETE = "scans:secret_store:delete"

    # Agents
    AGENTS_READ = "agents:read"
    AGENTS_WRITE = "agents:write"
    AGENTS_DELETE = "agents:delete"
    COMMANDS_READ = "agents:commands:read"
    COMMANDS_WRITE = "agents:commands:write"
    COMMANDS_DELETE = "agents:commands:delete"

    # Team (access control)
    TEAM_READ = "team:read"
    TEAM_UPDATE = "team:update"
    TEAM_DELETE = "team:delete"
    MEMBERS_READ = "team:members:read"
    MEMBERS_INVITE = "team:members:invite"
    MEMBERS_WRITE = "team:members:write"
    GROUPS_READ = "team:groups:read"
    GROUPS_WRITE = "team:groups:write"
    GROUPS_DELETE = "team:groups:delete"
    GROUPS_MEMBERS = "team:groups:members"
    GROUPS_ASSETS = "team:groups:assets"
    ROLES_READ = "team:roles:read"
    ROLES_WRITE = "team:roles:write"
    ROLES_DELETE = "team:roles:delete"
    ROLES_ASSIGN = "team:roles:assign"
    PERMISSION_SETS_READ = "team:permission_sets:read"
    PERMISSION_SETS_WRITE = "team:permission_sets:write"
    PERMISSION_SETS_DELETE = "team:permission_sets:delete"
    ASSIGNMENT_RULES_READ = "team:assignment_rules:read"
    ASSIGNMENT_RULES_WRITE = "team:assignment_rules:write"
    ASSIGNMENT_RULES_DELETE = "team:assignment_rules:delete"

    # Integrations
    INTEGRATIONS_READ = "integrations:read"
    INTEGRATIONS_MANAGE = "integrations:manage"
    SCM_CONNECTIONS_READ = "integrations:scm:read"
    SCM_CONNECTIONS_WRITE = "integrations:scm:write"
    SCM_CONNECTIONS_DELETE = "integrations:scm:delete"
    NOTIFICATIONS_READ = "integrations:notifications:read"
    NOTIFICATIONS_WRITE = "integrations:notifications:write"
    NOTIFICATIONS_DELETE = "integrations:notifications:delete"
    WEBHOOKS_READ = "integrations:webhooks:read"
    WEBHOOKS_WRITE = "integrations:webhooks:write"
    WEBHOOKS_DELETE = "integrations:webhooks:delete"
    API_KEYS_READ = "integrations:api_keys:read"
    API_KEYS_WRITE = "integrations:api_keys:write"
    API_KEYS_DELETE = "integrations:api_keys:delete"
    PIPELINES_READ = "integrations:pipelines:read"
    PIPELINES_WRITE = "integrations:pipelines:write"
    PIPELINES_DELETE = "integrations:pipelines:delete"
    PIPELINES_EXECUTE = "integrations:pipelines:execute"

    # Settings
    BILLING_READ = "settings:billing:read"
    BILLING_WRITE = "settings:billing:write"
    SLA_READ = "settings:sla:read"
    SLA_WRITE = "settings:sla:write"
    SLA_DELETE = "settings:sla:delete"

    # Attack surface (CTEM scoping)
    SCOPE_READ = "attack_surface:scope:read"
    SCOPE_WRITE = "attack_surface:scope:write"
    SCOPE_DELETE = "attack_surface:scope:delete"

    # Validation (CTEM)
    VALIDATION_READ = "validation:read"
    VALIDATION_WRITE = "validation:write"

    # Reports
    REPORTS_READ = "reports:read"
    REPORTS_WRITE = "reports:write"

    # Aliases (same value as the canonical member)
    TEMPLATE_SOURCES_READ = "scans:sources:read"
    TEMPLATE_SOURCES_WRITE = "scans:sources:write"
    TEMPLATE_SOURCES_DELETE = "scans:sources:delete"
    MEMBERS_MANAGE = "team:members:write"
    BILLING_MANAGE = "settings:billing:write"
    PENTEST_READ = "validation:read"
    PENTEST_WRITE = "validation:write"
    GROUPS_PERMISSIONS = "team:groups:write"
    PROJECTS_READ = "assets:read"
    PROJECTS_WRITE = "assets:write"
    PROJECTS_DELETE = "assets:delete"


# Iterating an Enum skips aliases, so this is the set of distinct identifiers
ALL_PERMISSIONS: FrozenSet[str] = frozenset(p.value for p in Permission)


PERMISSION_GROUPS: Dict[str, List[Permission]] = {
    "all_read": [
        Permission.DASHBOARD_READ,
        Permission.ASSETS_READ,
        Permission.ASSET_GROUPS_READ,
        Permission.COMPONENTS_READ,
        Permission.FINDINGS_READ,
        Permission.VULNERABILITIES_READ,
        Permission.CREDENTIALS_READ,
        Permission.REMEDIATION_READ,
        Permission.WORKFLOWS_READ,
        Permission.SCANS_READ,
        Permission.SCAN_PROFILES_READ,
        Permission.SOURCES_READ,
        Permission.TOOLS_READ,
        Permission.TENANT_TOOLS_READ,
        Permission.SCANNER_TEMPLATES_READ,
        Permission.SECRET_STORE_READ,
        Permission.AGENTS_READ,
        Permission.COMMANDS_READ,
        Permission.TEAM_READ,
        Permission.MEMBERS_READ,
        Permission.GROUPS_READ,
        Permission.ROLES_READ,
        Permission.PERMISSION_SETS_READ,
        Permission.ASSIGNMENT_RULES_READ,
        Permission.INTEGRATIONS_READ,
        Permission.SCM_CONNECTIONS_READ,
        Permission.NOTIFICATIONS_READ,
        Permission.WEBHOOKS_READ,
        Permission.API_KEYS_READ,
        Permission.PIPELINES_READ,
        Permission.BILLING_READ,
        Permission.SLA_READ,
        Permission.SCOPE_READ,
        Permission.VALIDATION_READ,
        Permission.REPORTS_READ,
        Permission.AUDIT_READ,
    ],
    "all_write": [
        Permission.ASSETS_WRITE,
        Permission.ASSET_GROUPS_WRITE,
        Permission.COMPONENTS_WRITE,
        Permission.FINDINGS_WRITE,
        Permission.VULNERABILITIES_WRITE,
        Permission.CREDENTIALS_WRITE,
        Permission.REMEDIATION_WRITE,
        Permission.WORKFLOWS_WRITE,
        Permission.POLICIES_WRITE,
        Permission.SCANS_WRITE,
        Permission.SCAN_PROFILES_WRITE,
        Permission.SOURCES_WRITE,
        Permission.TOOLS_WRITE,
        Permission.TENANT_TOOLS_WRITE,
        Permission.SCANNER_TEMPLATES_WRITE,
        Permission.SECRET_STORE_WRITE,
        Permission.AGENTS_WRITE,
        Permission.COMMANDS_WRITE,
        Permission.TEAM_UPDATE,
        Permission.MEMBERS_WRITE,
        Permission.GROUPS_WRITE,
        Permission.ROLES_WRITE,
        Permission.PERMISSION_SETS_WRITE,
        Permission.ASSIGNMENT_RULES_WRITE,
        Permission.SCM_CONNECTIONS_WRITE,
        Permission.NOTIFICATIONS_WRITE,
        Permission.WEBHOOKS_WRITE,
        Permission.API_KEYS_WRITE,
        Permission.PIPELINES_WRITE,
        Permission.BILLING_WRITE,
        Permission.SLA_WRITE,
        Permission.SCOPE_WRITE,
        Permission.VALIDATION_WRITE,
        Permission.REPORTS_WRITE,
    ],
    "all_delete": [
        Permission.ASSETS_DELETE,
        Permission.ASSET_GROUPS_DELETE,
        Permission.COMPONENTS_DELETE,
        Permission.FINDINGS_DELETE,
        Permission.VULNERABILITIES_DELETE,
        Permission.POLICIES_DELETE,
        Permission.SCANS_DELETE,
        Permission.SCAN_PROFILES_DELETE,
        Permission.SOURCES_DELETE,
        Permission.TOOLS_DELETE,
        Permission.TENANT_TOOLS_DELETE,
        Permission.SCANNER_TEMPLATES_DELETE,
        Permission.SECRET_STORE_DELETE,
        Permission.AGENTS_DELETE,
        Permission.COMMANDS_DELETE,
        Permission.TEAM_DELETE,
        Permission.GROUPS_DELETE,
        Permission.ROLES_DELETE,
        Permission.PERMISSION_SETS_DELETE,
        Permission.ASSIGNMENT_RULES_DELETE,
        Permission.SCM_CONNECTIONS_DELETE,
        Permission.NOTIFICATIONS_DELETE,
        Permission.WEBHOOKS_DELETE,
        Permission.API_KEYS_DELETE,
        Permission.PIPELINES_DELETE,
        Permission.SLA_DELETE,
        Permission.SCOPE_DELETE,
    ],
    "team_management": [
        Permission.TEAM_READ,
        Permission.TEAM_UPDATE,
        Permission.MEMBERS_READ,
        Permission.MEMBERS_INVITE,
        Permission.MEMBERS_WRITE,
        Permission.GROUPS_READ,
        Permission.GROUPS_WRITE,
        Permission.GROUPS_MEMBERS,
        Permission.GROUPS_ASSETS,
        Permission.ROLES_READ,
        Permission.ROLES_WRITE,
        Permission.ROLES_ASSIGN,
        Permission.PERMISSION_SETS_READ,
        Permission.PERMISSION_SETS_WRITE,
    ],
    "security": [
        Permission.FINDINGS_READ,
        Permission.FINDINGS_WRITE,
        Permission.FINDINGS_DELETE,
        Permission.VULNERABILITIES_READ,
        Permission.VULNERABILITIES_WRITE,
        Permission.CREDENTIALS_READ,
        Permission.CREDENTIALS_WRITE,
        Permission.VALIDATION_READ,
        Permission.VALIDATION_WRITE,
        Permission.SCOPE_READ,
        Permission.SCOPE_WRITE,
    ],
}


# Human-readable labels, shown in disabled-gate tooltips. Aliases share the
# label of their canonical member.
PERMISSION_LABELS: Dict[str, str] = {
    # Core
    Permission.DASHBOARD_READ: "View Dashboard",
    Permission.AUDIT_READ: "View Audit Logs",

    # Assets
    Permission.ASSETS_READ: "View Assets",
    Permission.ASSETS_WRITE: "Edit Assets",
    Permission.ASSETS_DELETE: "Delete Assets",
    Permission.ASSET_GROUPS_READ: "View Asset Groups",
    Permission.ASSET_GROUPS_WRITE: "Manage Asset Groups",
    Permission.ASSET_GROUPS_DELETE: "Delete Asset Groups",
    Permission.COMPONENTS_READ: "View Components",
    Permission.COMPONENTS_WRITE: "Edit Components",
    Permission.COMPONENTS_DELETE: "Delete Components",

    # Findings
    Permission.FINDINGS_READ: "View Findings",
    Permission.FINDINGS_WRITE: "Edit Findings",
    Permission.FINDINGS_DELETE: "Delete Findings",
    Permission.VULNERABILITIES_READ: "View Vulnerabilities",
    Permission.VULNERABILITIES_WRITE: "Edit Vulnerabilities",
    Permission.VULNERABILITIES_DELETE: "Delete Vulnerabilities",
    Permission.CREDENTIALS_READ: "View Credentials",
    Permission.CREDENTIALS_WRITE: "Manage Credentials",
    Permission.REMEDIATION_READ: "View Remediation",
    Permission.REMEDIATION_WRITE: "Manage Remediation",
    Permission.WORKFLOWS_READ: "View Workflows",
    Permission.WORKFLOWS_WRITE: "Manage Workflows",
    Permission.POLICIES_READ: "View Policies",
    Permission.POLICIES_WRITE: "Manage Policies",
    Permission.POLICIES_DELETE: "Delete Policies",

    # Scans
    Permission.SCANS_READ: "View Scans",
    Permission.SCANS_WRITE: "Manage Scans",
    Permission.SCANS_DELETE: "Delete Scans",
    Permission.SCANS_EXECUTE: "Execute Scans",
    Permission.SCAN_PROFILES_READ: "View Scan Profiles",
    Permission.SCAN_PROFILES_WRITE: "Manage Scan Profiles",
    Permission.SCAN_PROFILES_DELETE: "Delete Scan Profiles",
    Permission.SOURCES_READ: "View Sources",
    Permission.SOURCES_WRITE: "Manage Sources",
    Permission.SOURCES_DELETE: "Delete Sources",
    Permission.TOOLS_READ: "View Tools",
    Permission.TOOLS_WRITE: "Manage Tools",
    Permission.TOOLS_DELETE: "Delete Tools",
    Permission.TENANT_TOOLS_READ: "View Tool Configs",
    Permission.TENANT_TOOLS_WRITE: "Manage Tool Configs",
    Permission.TENANT_TOOLS_DELETE: "Delete Tool Configs",
    Permission.SCANNER_TEMPLATES_READ: "View Scanner Templates",
    Permission.SCANNER_TEMPLATES_WRITE: "Manage Scanner Templates",
    Permission.SCANNER_TEMPLATES_DELETE: "Delete Scanner Templates",
    Permission.SECRET_STORE_READ: "View Secret Store",
    Permission.SECRET_STORE_WRITE: "Manage Secret Store",
    Permission.SECRET_STORE_DELETE: "Delete Secrets",

    # Agents
    Permission.AGENTS_READ: "View Agents",
    Permission.AGENTS_WRITE: "Manage Agents",
    Permission.AGENTS_DELETE: "Delete Agents",
    Permission.COMMANDS_READ: "View Commands",
    Permission.COMMANDS_WRITE: "Send Commands",
    Permission.COMMANDS_DELETE: "Delete Commands",

    # Team
    Permission.TEAM_READ: "View Team Settings",
    Permission.TEAM_UPDATE: "Update Team Settings",
    Permission.TEAM_DELETE: "Delete Team",
    Permission.MEMBERS_READ: "View Members",
    Permission.MEMBERS_INVITE: "Invite Members",
    Permission.MEMBERS_WRITE: "Manage Members",
    Permission.GROUPS_READ: "View Groups",
    Permission.GROUPS_WRITE: "Manage Groups",
    Permission.GROUPS_DELETE: "Delete Groups",
    Permission.GROUPS_MEMBERS: "Manage Group Members",
    Permission.GROUPS_ASSETS: "Manage Group Assets",
    Permission.ROLES_READ: "View Roles",
    Permission.ROLES_WRITE: "Manage Roles",
    Permission.ROLES_DELETE: "Delete Roles",
    Permission.ROLES_ASSIGN: "Assign Roles",
    Permission.PERMISSION_SETS_READ: "View Permission Sets",
    Permission.PERMISSION_SETS_WRITE: "Manage Permission Sets",
    Permission.PERMISSION_SETS_DELETE: "Delete Permission Sets",
    Permission.ASSIGNMENT_RULES_READ: "View Assignment Rules",
    Permission.ASSIGNMENT_RULES_WRITE: "Manage Assignment Rules",
    Permission.ASSIGNMENT_RULES_DELETE: "Delete Assignment Rules",

    # Integrations
    Permission.INTEGRATIONS_READ: "View Integrations",
    Permission.INTEGRATIONS_MANAGE: "Manage Integrations",
    Permission.SCM_CONNECTIONS_READ: "View SCM Connections",
    Permission.SCM_CONNECTIONS_WRITE: "Manage SCM Connections",
    Permission.SCM_CONNECTIONS_DELETE: "Delete SCM Connections",
    Permission.NOTIFICATIONS_READ: "View Notifications",
    Permission.NOTIFICATIONS_WRITE: "Manage Notifications",
    Permission.NOTIFICATIONS_DELETE: "Delete Notifications",
    Permission.WEBHOOKS_READ: "View Webhooks",
    Permission.WEBHOOKS_WRITE: "Manage Webhooks",
    Permission.WEBHOOKS_DELETE: "Delete Webhooks",
    Permission.API_KEYS_READ: "View API Keys",
    Permission.API_KEYS_WRITE: "Manage API Keys",
    Permission.API_KEYS_DELETE: "Delete API Keys",
    Permission.PIPELINES_READ: "View Pipelines",
    Permission.PIPELINES_WRITE: "Manage Pipelines",
    Permission.PIPELINES_DELETE: "Delete Pipelines",
    Permission.PIPELINES_EXECUTE: "Execute Pipelines",

    # Settings
    Permission.BILLING_READ: "View Billing",
    Permission.BILLING_WRITE: "Manage Billing",
    Permission.SLA_READ: "View SLA",
    Permission.SLA_WRITE: "Manage SLA",
    Permission.SLA_DELETE: "Delete SLA",

    # Attack surface
    Permission.SCOPE_READ: "View Scope",
    Permission.SCOPE_WRITE: "Manage Scope",
    Permission.SCOPE_DELETE: "Delete Scope",

    # Validation
    Permission.VALIDATION_READ: "View Validation",
    Permission.VALIDATION_WRITE: "Manage Validation",

    # Reports
    Permission.REPORTS_READ: "View Reports",
    Permission.REPORTS_WRITE: "Create Reports",
}


def _as_text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def is_valid_permission(value: Any) -> bool:
    """Check whether a value is a permission identifier in the catalog."""
    if not isinstance(value, str):
        return False
    return _as_text(value) in ALL_PERMISSIONS


def get_permission_label(permission: Any) -> str:
    """
    Get a human-readable label for a permission.

    Falls back to formatting the identifier itself, capitalizing the first
    character of each ``:``-separated segment (``"assets:write"`` becomes
    ``"Assets Write"``). Never raises: unknown or malformed input degrades to
    a formatted label, empty input gives an empty label.
    """
    text = _as_text(permission)
    label = PERMISSION_LABELS.get(text)
    if label:
        return label
    return " ".join(part[:1].upper() + part[1:] for part in text.split(":"))


def expand_permission_group(group_name: str) -> List[str]:
    """
    Expand a permission group to its permission identifiers.

    Args:
        group_name: Group name, e.g. ``"team_management"`` (case-insensitive)

    Returns:
        Permission identifiers in group order; empty for an unknown group
    """
    key = _as_text(group_name).strip().lower()
    if key not in PERMISSION_GROUPS:
        logger.warning(f"Permission group '{group_name}' not found")
        return []
    return [p.value for p in PERMISSION_GROUPS[key]]

"""Navigation feature: tree entities, module licensing and the navigation filter."""

from .entities import ReleaseStatus, LicensingModule, TenantModules, NavItem, NavGroup
from .models import LicensingModuleModel, TenantModulesResponse
from .services import (
    filter_navigation,
    filter_nav_item,
    has_item_access,
    ModuleLicensingService,
)

__all__ = [
    "ReleaseStatus",
    "LicensingModule",
    "TenantModules",
    "NavItem",
    "NavGroup",
    "LicensingModuleModel",
    "TenantModulesResponse",
    "filter_navigation",
    "filter_nav_item",
    "has_item_access",
    "ModuleLicensingService",
]

"""Navigation and module licensing entities."""

from .modules import ReleaseStatus, LicensingModule, TenantModules
from .nav_item import NavItem, NavGroup

__all__ = [
    "ReleaseStatus",
    "LicensingModule",
    "TenantModules",
    "NavItem",
    "NavGroup",
]

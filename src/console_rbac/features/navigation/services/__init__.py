"""Navigation filtering and module licensing."""

from .filter import filter_navigation, filter_nav_item, has_item_access
from .module_service import ModuleLicensingService

__all__ = [
    "filter_navigation",
    "filter_nav_item",
    "has_item_access",
    "ModuleLicensingService",
]

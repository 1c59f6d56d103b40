"""
Navigation filter.

Prunes the application's navigation tree to the items the user may see. An
item is kept only if every axis passes:

1. Module: a preview/beta module is always shown (discoverability). Otherwise
   an inactive or disabled module hides the item, and so does a module
   missing from a non-empty licensed list. No licensing data fails open.
2. ``min_role``: ``is_at_least``; no tenant role fails.
3. ``role``: exact match against one of the roles.
4. ``permission``: single identifier ``can``, list ``can_any``; an empty
   ``role`` or ``permission`` list matches nothing.

Sub-menus are filtered child by child; a sub-menu with no surviving children
is dropped. Children without their own module inherit the parent's release
status. The filter is a pure function of its inputs.
"""

from dataclasses import replace
from typing import Iterable, List, Optional

from ...permissions.entities.protocols import AccessDecisionProtocol
from ..entities.modules import ReleaseStatus, TenantModules
from ..entities.nav_item import NavGroup, NavItem


def _passes_module(module: str, modules: TenantModules) -> bool:
    status = modules.release_status(module)
    if status is not None and status.is_discoverable:
        return True
    if status is ReleaseStatus.DISABLED or not modules.is_module_active(module):
        return False
    return modules.has_module(module)


def has_item_access(item: NavItem, access: AccessDecisionProtocol, modules: TenantModules) -> bool:
    """Check the item's own gating attributes, ignoring its children."""
    if item.module and not _passes_module(item.module, modules):
        return False

    if item.min_role and not access.is_at_least(item.min_role):
        return False

    if item.role is not None:
        roles = (item.role,) if isinstance(item.role, str) else item.role
        if not access.is_any_role(*roles):
            return False

    if item.permission is not None:
        if isinstance(item.permission, str):
            if not access.can(item.permission):
                return False
        elif not access.can_any(*item.permission):
            return False

    return True


def filter_nav_item(
    item: NavItem,
    access: AccessDecisionProtocol,
    modules: TenantModules,
    inherited_status: Optional[ReleaseStatus] = None,
) -> Optional[NavItem]:
    """Filter one item (and its children); None if it is hidden."""
    if not has_item_access(item, access, modules):
        return None

    if item.module:
        status = modules.release_status(item.module)
    else:
        status = inherited_status if inherited_status is not None else item.release_status

    if not item.items:
        return replace(item, release_status=status)

    children = tuple(
        child
        for child in (filter_nav_item(c, access, modules, status) for c in item.items)
        if child is not None
    )
    if not children:
        return None
    return replace(item, release_status=status, items=children)


def filter_navigation(
    groups: Iterable[NavGroup],
    access: AccessDecisionProtocol,
    modules: Optional[TenantModules] = None,
) -> List[NavGroup]:
    """Filter navigation groups; groups left without items are dropped."""
    modules = modules or TenantModules.empty()
    result = []
    for group in groups:
        items = tuple(
            item
            for item in (filter_nav_item(i, access, modules) for i in group.items)
            if item is not None
        )
        if items:
            result.append(replace(group, items=items))
    return result

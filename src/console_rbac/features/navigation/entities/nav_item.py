"""Navigation tree entities.

The tree is authored by the application and only ever filtered: filtering
returns new items built with ``dataclasses.replace``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .modules import ReleaseStatus

RoleSpec = Union[str, Sequence[str], None]
PermissionSpec = Union[str, Sequence[str], None]


def _freeze(value):
    if value is None or isinstance(value, str):
        return value
    return tuple(getattr(v, "value", v) for v in value)


@dataclass(frozen=True)
class NavItem:
    """A navigation link or, when ``items`` is non-empty, a sub-menu."""

    title: str
    url: str = ""
    icon: Optional[str] = None
    module: Optional[str] = None
    permission: PermissionSpec = None
    role: RoleSpec = None
    min_role: Optional[str] = None
    items: Tuple["NavItem", ...] = ()
    release_status: Optional[ReleaseStatus] = None
    extra: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "permission", _freeze(getattr(self.permission, "value", self.permission)))
        object.__setattr__(self, "role", _freeze(getattr(self.role, "value", self.role)))
        object.__setattr__(self, "min_role", getattr(self.min_role, "value", self.min_role))
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def is_composite(self) -> bool:
        return bool(self.items)


@dataclass(frozen=True)
class NavGroup:
    """A titled group of navigation items."""

    title: str
    items: Tuple[NavItem, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

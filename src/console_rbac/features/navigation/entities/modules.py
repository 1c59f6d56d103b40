"""Module licensing entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional, Tuple


class ReleaseStatus(str, Enum):
    """Module release status.

    The licensing API reports ``coming_soon`` and ``released``; they are
    accepted as aliases of ``preview`` and ``stable``.
    """

    PREVIEW = "preview"
    BETA = "beta"
    STABLE = "stable"
    DEPRECATED = "deprecated"
    DISABLED = "disabled"

    @classmethod
    def _missing_(cls, value):
        aliases = {"coming_soon": cls.PREVIEW, "released": cls.STABLE}
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None

    @property
    def is_discoverable(self) -> bool:
        """Shown in navigation regardless of licensing."""
        return self in (ReleaseStatus.PREVIEW, ReleaseStatus.BETA)


@dataclass(frozen=True)
class LicensingModule:
    """A licensable product module."""

    id: str
    slug: str = ""
    name: str = ""
    is_active: bool = True
    release_status: Optional[ReleaseStatus] = None
    parent_module_id: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    display_order: int = 0
    event_types: Tuple[str, ...] = ()

    def matches(self, module_id: str) -> bool:
        return module_id == self.id or (bool(self.slug) and module_id == self.slug)


@dataclass(frozen=True)
class TenantModules:
    """Modules licensed to the active tenant.

    An empty ``module_ids`` means no licensing data is available, not "no
    licence": ``has_module`` fails open in that case.
    """

    module_ids: FrozenSet[str] = frozenset()
    modules: Tuple[LicensingModule, ...] = ()
    sub_modules: Dict[str, Tuple[LicensingModule, ...]] = field(default_factory=dict)
    event_types: Tuple[str, ...] = ()
    coming_soon_module_ids: FrozenSet[str] = frozenset()
    beta_module_ids: FrozenSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "module_ids", frozenset(self.module_ids))
        object.__setattr__(self, "modules", tuple(self.modules))
        object.__setattr__(self, "event_types", tuple(self.event_types))
        object.__setattr__(self, "coming_soon_module_ids", frozenset(self.coming_soon_module_ids))
        object.__setattr__(self, "beta_module_ids", frozenset(self.beta_module_ids))

    @classmethod
    def empty(cls) -> "TenantModules":
        return cls()

    @classmethod
    def from_ids(cls, module_ids: Iterable[str], modules: Iterable[LicensingModule] = ()) -> "TenantModules":
        return cls(module_ids=frozenset(module_ids), modules=tuple(modules))

    @property
    def has_data(self) -> bool:
        return bool(self.module_ids)

    def get_module(self, module_id: str) -> Optional[LicensingModule]:
        """Find a module by id or slug."""
        for module in self.modules:
            if module.matches(module_id):
                return module
        return None

    def has_module(self, module_id: str) -> bool:
        """Licensed check; true for everything when no licensing data is loaded."""
        if self.module_ids:
            return module_id in self.module_ids
        return True

    def has_module_strict(self, module_id: str) -> bool:
        """Licensed check that fails closed when no licensing data is loaded."""
        return module_id in self.module_ids

    def release_status(self, module_id: str) -> Optional[ReleaseStatus]:
        module = self.get_module(module_id)
        if module is not None:
            return module.release_status
        if module_id in self.coming_soon_module_ids:
            return ReleaseStatus.PREVIEW
        if module_id in self.beta_module_ids:
            return ReleaseStatus.BETA
        return None

    def is_module_active(self, module_id: str) -> bool:
        """Unknown modules count as active."""
        module = self.get_module(module_id)
        return module.is_active if module is not None else True

"""Response models for the tenant modules endpoint."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..entities.modules import LicensingModule, ReleaseStatus, TenantModules


def _event_type_id(event_type: Any) -> str:
    # Event types arrive either as ids or as objects with an "id" key
    if isinstance(event_type, dict):
        return str(event_type.get("id", ""))
    return str(event_type)


class LicensingModuleModel(BaseModel):
    """One module as reported by ``GET /api/v1/me/modules``."""

    model_config = ConfigDict(extra="ignore")

    id: str
    slug: str = ""
    name: str = ""
    description: Optional[str] = None
    category: Optional[str] = None
    display_order: int = 0
    is_active: bool = True
    release_status: Optional[ReleaseStatus] = None
    parent_module_id: Optional[str] = None
    event_types: List[str] = Field(default_factory=list)

    @field_validator("release_status", mode="before")
    @classmethod
    def _unknown_status_as_none(cls, value):
        if value is None or value == "":
            return None
        try:
            return ReleaseStatus(value)
        except ValueError:
            return None

    def to_entity(self) -> LicensingModule:
        return LicensingModule(
            id=self.id,
            slug=self.slug,
            name=self.name,
            is_active=self.is_active,
            release_status=self.release_status,
            parent_module_id=self.parent_module_id,
            description=self.description,
            category=self.category,
            display_order=self.display_order,
            event_types=tuple(self.event_types),
        )


class TenantModulesResponse(BaseModel):
    """Body of ``GET /api/v1/me/modules``."""

    model_config = ConfigDict(extra="ignore")

    module_ids: List[str] = Field(default_factory=list)
    modules: List[LicensingModuleModel] = Field(default_factory=list)
    sub_modules: Dict[str, List[LicensingModuleModel]] = Field(default_factory=dict)
    event_types: List[Any] = Field(default_factory=list)
    coming_soon_module_ids: List[str] = Field(default_factory=list)
    beta_module_ids: List[str] = Field(default_factory=list)

    @field_validator(
        "module_ids", "modules", "sub_modules", "event_types",
        "coming_soon_module_ids", "beta_module_ids",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value, info):
        if value is None:
            return {} if info.field_name == "sub_modules" else []
        return value

    def to_entity(self) -> TenantModules:
        return TenantModules(
            module_ids=frozenset(self.module_ids),
            modules=tuple(m.to_entity() for m in self.modules),
            sub_modules={
                parent: tuple(m.to_entity() for m in children)
                for parent, children in self.sub_modules.items()
            },
            event_types=tuple(_event_type_id(e) for e in self.event_types),
            coming_soon_module_ids=frozenset(self.coming_soon_module_ids),
            beta_module_ids=frozenset(self.beta_module_ids),
        )

"""Response models for the permission sync endpoint."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PermissionSyncResponse(BaseModel):
    """Body of ``GET /api/v1/me/permissions/sync``."""

    model_config = ConfigDict(extra="ignore")

    permissions: List[str] = Field(default_factory=list, description="Permission identifiers for the tenant")
    version: int = Field(default=0, description="Permission version, bumped on every RBAC change")

    @field_validator("permissions", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("version", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return 0 if value is None else value

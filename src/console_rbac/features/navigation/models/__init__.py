"""Wire models for module licensing."""

from .responses import LicensingModuleModel, TenantModulesResponse

__all__ = ["LicensingModuleModel", "TenantModulesResponse"]

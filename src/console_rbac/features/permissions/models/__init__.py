"""Wire models for the permission feature."""

from .responses import PermissionSyncResponse

__all__ = ["PermissionSyncResponse"]

"""Value objects for console-rbac."""

from .identifiers import TenantId

__all__ = [
    "TenantId",
]

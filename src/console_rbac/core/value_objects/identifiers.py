"""Value objects for identifiers in console-rbac.

Tenant ids travel through the sync service, the cache and request headers as
plain strings. These wrappers validate them at the service boundary.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TenantId:
    """Tenant identifier value object with basic validation."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise ValueError("Tenant ID must be a non-empty string")
        object.__setattr__(self, "value", self.value.strip())
        if not self.value:
            raise ValueError("Tenant ID must be a non-empty string")

    def __str__(self) -> str:
        return self.value

"""Core exceptions and value objects for console-rbac."""

from .exceptions import *  # noqa: F401,F403
from .exceptions import __all__ as _exceptions_all
from .value_objects import TenantId

__all__ = list(_exceptions_all) + [
    "TenantId",
]

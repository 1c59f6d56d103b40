"""Permission snapshot storage."""

from .permission_cache import InMemoryPermissionCache, RedisPermissionCache

__all__ = [
    "InMemoryPermissionCache",
    "RedisPermissionCache",
]

"""
Permission snapshot cache implementations.

Stores the last known permission snapshot per tenant so that a tenant switch
can show permissions instantly while the live sync runs, and so that a failed
sync can fall back to them. Entries expire after 24 hours by default.

Cache failures are logged and reported as a miss, never raised.

Keys are ``{prefix}:{tenant_id}``. When one Redis instance is shared between
users, give each session its own prefix (e.g. ``console_perms:{user_id}``).
"""
import json
import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Tuple

import redis.asyncio as redis

from ....config.constants import CacheKeys, CacheTTL
from ..entities.protocols import PermissionCacheProtocol
from ..entities.snapshot import StoredPermissions

logger = logging.getLogger(__name__)


def _cache_key(prefix: str, tenant_id: str) -> str:
    return CacheKeys.TENANT_PERMISSIONS.format(prefix=prefix, tenant_id=tenant_id)


class InMemoryPermissionCache(PermissionCacheProtocol):
    """In-process permission cache with TTL checked on read."""

    def __init__(
        self,
        ttl: int = CacheTTL.PERMISSIONS,
        key_prefix: str = CacheKeys.KEY_PREFIX,
        clock: Callable[[], float] = time.time,
    ):
        self._ttl = ttl
        self._key_prefix = key_prefix
        self._clock = clock
        self._entries: Dict[str, Tuple[float, StoredPermissions]] = {}

    async def get(self, tenant_id: str) -> Optional[StoredPermissions]:
        key = _cache_key(self._key_prefix, tenant_id)
        entry = self._entries.get(key)
        if entry is None:
            return None

        stored_at, stored = entry
        if self._clock() - stored_at > self._ttl:
            del self._entries[key]
            logger.debug(f"Cached permissions for tenant {tenant_id} expired")
            return None
        return stored

    async def set(self, tenant_id: str, permissions: List[str], version: int) -> bool:
        now = self._clock()
        stored = StoredPermissions(
            permissions=list(permissions),
            version=version,
            updated_at=datetime.fromtimestamp(now, tz=timezone.utc),
        )
        self._entries[_cache_key(self._key_prefix, tenant_id)] = (now, stored)
        return True

    async def delete(self, tenant_id: str) -> bool:
        return self._entries.pop(_cache_key(self._key_prefix, tenant_id), None) is not None

    async def clear_all(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def cleanup_expired(self) -> int:
        """Remove expired entries; returns the number removed."""
        now = self._clock()
        expired = [key for key, (stored_at, _) in self._entries.items() if now - stored_at > self._ttl]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Removed {len(expired)} expired permission cache entries")
        return len(expired)


class RedisPermissionCache(PermissionCacheProtocol):
    """
    Redis implementation of the permission snapshot cache.

    Features:
    - Tenant isolation with key prefixing
    - Automatic TTL management via SETEX
    - JSON serialization of the stored snapshot
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        key_prefix: str = CacheKeys.KEY_PREFIX,
        ttl: int = CacheTTL.PERMISSIONS,
    ):
        self._redis = redis_client
        self._key_prefix = key_prefix
        self._ttl = ttl

    @classmethod
    def from_url(cls, url: str, key_prefix: str = CacheKeys.KEY_PREFIX, ttl: int = CacheTTL.PERMISSIONS) -> "RedisPermissionCache":
        """Create a cache backed by a new Redis client."""
        return cls(redis.from_url(url), key_prefix=key_prefix, ttl=ttl)

    async def get(self, tenant_id: str) -> Optional[StoredPermissions]:
        full_key = _cache_key(self._key_prefix, tenant_id)
        try:
            result = await self._redis.get(full_key)
        except Exception as e:
            logger.warning(f"Failed to get permissions from cache: {e}")
            return None

        if result is None:
            return None

        try:
            raw = result.decode() if isinstance(result, bytes) else result
            stored = StoredPermissions.from_dict(json.loads(raw))
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding corrupt cached permissions for tenant {tenant_id}: {e}")
            await self.delete(tenant_id)
            return None

        updated_at = stored.updated_at
        if updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)
        if datetime.now(timezone.utc) - updated_at > timedelta(seconds=self._ttl):
            await self.delete(tenant_id)
            return None
        return stored

    async def set(self, tenant_id: str, permissions: List[str], version: int) -> bool:
        try:
            full_key = _cache_key(self._key_prefix, tenant_id)
            data = json.dumps(StoredPermissions(permissions=list(permissions), version=version).to_dict())
            await self._redis.setex(full_key, self._ttl, data)
            return True
        except Exception as e:
            logger.warning(f"Failed to cache permissions: {e}")
            return False

    async def delete(self, tenant_id: str) -> bool:
        try:
            full_key = _cache_key(self._key_prefix, tenant_id)
            return bool(await self._redis.delete(full_key))
        except Exception as e:
            logger.warning(f"Failed to invalidate cached permissions: {e}")
            return False

    async def clear_all(self) -> int:
        try:
            pattern = _cache_key(self._key_prefix, "*")

            keys = []
            async for key in self._redis.scan_iter(match=pattern):
                keys.append(key)

            if keys:
                await self._redis.delete(*keys)
                logger.debug(f"Cleared {len(keys)} cached permission snapshots")
            return len(keys)
        except Exception as e:
            logger.warning(f"Failed to clear permission cache: {e}")
            return 0

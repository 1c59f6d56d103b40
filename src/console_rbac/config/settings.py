"""
Runtime settings for the console permission core.

Environment-driven configuration for the services that feed the permission
core (permission sync, module licensing, snapshot cache). All values can be
overridden with ``CONSOLE_RBAC_``-prefixed environment variables or a ``.env``
file.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions.base import ConfigurationError
from .constants import ApiPaths, CacheKeys, CacheTTL, SyncDefaults


class RbacSettings(BaseSettings):
    """Settings for permission sync, module licensing and caching."""

    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_RBAC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Console API
    api_base_url: str = Field(default="http://localhost:8080")
    permissions_sync_path: str = Field(default=ApiPaths.PERMISSIONS_SYNC)
    modules_path: str = Field(default=ApiPaths.TENANT_MODULES)
    request_timeout: float = Field(default=SyncDefaults.REQUEST_TIMEOUT)

    # Permission sync
    poll_interval: float = Field(default=SyncDefaults.POLL_INTERVAL)
    min_fetch_interval: float = Field(default=SyncDefaults.MIN_FETCH_INTERVAL)
    min_hidden_duration: float = Field(default=SyncDefaults.MIN_HIDDEN_DURATION)

    # Module licensing
    modules_cache_ttl: float = Field(default=SyncDefaults.MODULES_CACHE_TTL)

    # Snapshot cache
    cache_ttl: int = Field(default=CacheTTL.PERMISSIONS)
    cache_key_prefix: str = Field(default=CacheKeys.KEY_PREFIX)
    redis_url: Optional[str] = Field(default=None)

    @field_validator("poll_interval", "min_fetch_interval", "min_hidden_duration", "request_timeout", "modules_cache_ttl")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("interval values must be non-negative")
        return value

    @field_validator("cache_ttl")
    @classmethod
    def _positive_ttl(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("cache_ttl must be positive")
        return value


@lru_cache()
def get_settings() -> RbacSettings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return RbacSettings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid console-rbac settings: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e

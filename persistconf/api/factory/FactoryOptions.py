"""Ad-hoc options accepted by ConfigFactory."""

from pydantic import BaseModel, ConfigDict, Field

from ..config.ScalarMapping import Scalar
from ..uri.ConnectionStringBuilder import DEFAULT_PORT


class CacheOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    max_size: int | None = Field(default=None, description="Maximum cached entries")
    ttl_ms: int | None = Field(default=None, description="Entry time-to-live in milliseconds")


class HostOption(BaseModel):
    model_config = ConfigDict(extra="forbid")

    host: str
    port: int = DEFAULT_PORT


class _CommonOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    encryption: bool = Field(default=False, description="Enable at-rest encryption")
    encryption_key: str | None = Field(default=None, description="Encryption key")
    cache: bool | CacheOptions | None = Field(default=None, description="False disables the cache")

    def cache_options(self) -> CacheOptions:
        if self.cache is None or self.cache is True:
            return CacheOptions()
        if self.cache is False:
            return CacheOptions(enabled=False)
        return self.cache


class SqliteOptions(_CommonOptions):
    path: str | None = Field(default=None, description="Database file path")
    sync_interval_ms: int | None = Field(default=None, description="Sync interval when combined into hybrid storage")


class MongoOptions(_CommonOptions):
    username: str | None = None
    password: str | None = None
    hosts: list[str | HostOption] | None = Field(default=None, description="Hosts; bare strings use the default port")
    database: str | None = None
    options: dict[str, Scalar] = Field(default_factory=dict, description="Extra connection string options")
    max_pool_size: int | None = None
    timeout_ms: int | None = Field(default=None, description="Server selection timeout in milliseconds")

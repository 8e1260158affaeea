from pydantic import BaseModel, ConfigDict, Field


class CacheConfig(BaseModel):
    """In-memory cache settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=True, description="Enable the cache")
    max_size: int = Field(default=50, description="Maximum number of cached entries")
    ttl_ms: int = Field(default=300000, description="Entry time-to-live in milliseconds")

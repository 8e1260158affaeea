from pydantic import BaseModel, ConfigDict, Field


class SyncConfig(BaseModel):
    """SQLite to MongoDB synchronization (hybrid storage only)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=False, description="Synchronize the two backends")
    interval_ms: int | None = Field(default=None, description="Milliseconds between sync runs")

"""SQLite backend configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .ScalarMapping import OptionalScalarMapping


class SqliteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(default="", description="Database file path (':memory:' for in-memory)")
    enable_wal: bool = Field(default=True, description="Use write-ahead logging")
    pragmas: OptionalScalarMapping = Field(
        default_factory=dict, validate_default=True, description="PRAGMA name to value (read-only)"
    )

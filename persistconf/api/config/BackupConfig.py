"""Backup schedule configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .Destination import Destination


class BackupConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=True, description="Run scheduled backups")
    interval_ms: int = Field(..., description="Milliseconds between backups")
    retention_days: int = Field(..., description="Days to keep backups")
    destination: Destination = Field(..., description="Local directory or cloud bucket")

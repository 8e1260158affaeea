"""Persistence log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .Destination import Destination, LocalPath


class LogConfig(BaseModel):
    """Where and how verbosely the storage layer logs."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: Literal["debug", "info", "warn", "error"] = Field(default="info", description="Logging level")
    target: Destination = Field(
        default_factory=lambda: LocalPath(path="./logs/persistence.log"),
        description="Log file or hosted logging service",
    )

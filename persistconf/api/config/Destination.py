"""Backup and log destinations."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LocalPath(BaseModel):
    """A filesystem location."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["local"] = "local"
    path: str = Field(..., description="Filesystem path (file or directory)")


class CloudTarget(BaseModel):
    """A cloud service location (object storage bucket or hosted logging service)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["cloud"] = "cloud"
    provider: str = Field(..., description="Cloud provider, e.g. 'aws-s3', 'aliyun-oss', 'cloudwatch'")
    bucket: str | None = Field(default=None, description="Bucket name for object storage targets")
    region: str | None = Field(default=None, description="Provider region")
    service: str | None = Field(default=None, description="Hosted service name for logging targets")


Destination = Annotated[LocalPath | CloudTarget, Field(discriminator="kind")]

from pydantic import BaseModel, ConfigDict, Field


class EncryptionConfig(BaseModel):
    """At-rest encryption settings. A key is required when enabled."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=False, description="Encrypt persisted data")
    key: str | None = Field(default=None, description="Encryption key")

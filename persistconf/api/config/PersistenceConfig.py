"""Top-level persistence configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .BackupConfig import BackupConfig
from .CacheConfig import CacheConfig
from .EncryptionConfig import EncryptionConfig
from .LogConfig import LogConfig
from .MongoConfig import MongoConfig
from .SqliteConfig import SqliteConfig
from .SyncConfig import SyncConfig

# Registry: storage types and the backends each one requires (ONLY place they are enumerated)
STORAGE_BACKENDS: dict[str, tuple[str, ...]] = {
    "sqlite": ("sqlite",),
    "mongodb": ("mongodb",),
    "hybrid": ("sqlite", "mongodb"),
}
STORAGE_TYPES: tuple[str, ...] = tuple(STORAGE_BACKENDS)


class PersistenceConfig(BaseModel):
    """How the application persists its data.

    `storage_type` is a plain string so that an invalid value coming from an
    override can still be represented and reported by `validate_config`.
    Instances are frozen; use `model_copy(update=...)` to derive new ones.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    storage_type: str = Field(..., description="One of 'sqlite', 'mongodb', 'hybrid'")
    sqlite: SqliteConfig | None = Field(default=None, description="Required for sqlite and hybrid storage")
    mongodb: MongoConfig | None = Field(default=None, description="Required for mongodb and hybrid storage")
    encryption: EncryptionConfig = Field(default_factory=EncryptionConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    backup: BackupConfig | None = Field(default=None)
    logging: LogConfig = Field(default_factory=LogConfig)

    @property
    def required_backends(self) -> tuple[str, ...]:
        """Backends the storage type needs; empty for an unknown storage type."""
        return STORAGE_BACKENDS.get(self.storage_type, ())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for serialization."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Serialize deterministically (field order is fixed by the model)."""
        return self.model_dump_json()

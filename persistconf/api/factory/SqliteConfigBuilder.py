"""Fluent builder for SQLite-only configurations."""

from dataclasses import dataclass, field, replace

from ...constants import BASE_PRAGMAS, DAY_MS, SQLITE_BACKUP_DIR, SQLITE_DATA_DIR
from ..config.BackupConfig import BackupConfig
from ..config.CacheConfig import CacheConfig
from ..config.Destination import LocalPath
from ..config.EncryptionConfig import EncryptionConfig
from ..config.PersistenceConfig import PersistenceConfig
from ..config.SqliteConfig import SqliteConfig


@dataclass(frozen=True)
class SqliteConfigBuilder:
    """Immutable builder; each step returns a new builder.

    Example:
        >>> config = (
        ...     SqliteConfigBuilder()
        ...     .set_database_path("./data/team.db")
        ...     .enable_encryption("team-secret-key")
        ...     .set_cache(100, 600000)
        ...     .enable_backup(86400000, 7)
        ...     .build()
        ... )
    """

    path: str = f"{SQLITE_DATA_DIR}/ziwei.db"
    encryption: EncryptionConfig = field(default_factory=EncryptionConfig)
    cache: CacheConfig = field(default_factory=lambda: CacheConfig(enabled=True, max_size=50, ttl_ms=300000))
    pragmas: tuple[tuple[str, object], ...] = tuple(BASE_PRAGMAS.items())
    backup: BackupConfig | None = None

    def set_database_path(self, path: str) -> "SqliteConfigBuilder":
        return self._with(path=path)

    def enable_encryption(self, key: str) -> "SqliteConfigBuilder":
        return self._with(encryption=EncryptionConfig(enabled=True, key=key))

    def set_cache(self, max_size: int | None = None, ttl_ms: int | None = None) -> "SqliteConfigBuilder":
        return self._with(cache=CacheConfig(enabled=True, max_size=max_size or 50, ttl_ms=ttl_ms or 300000))

    def enable_backup(
        self,
        interval_ms: int | None = None,
        retention_days: int | None = None,
        path: str | None = None,
    ) -> "SqliteConfigBuilder":
        return self._with(
            backup=BackupConfig(
                enabled=True,
                interval_ms=interval_ms or DAY_MS,
                retention_days=retention_days or 7,
                destination=LocalPath(path=path or SQLITE_BACKUP_DIR),
            )
        )

    def set_performance(self, cache_size: int | None = None, mmap_size: int | None = None) -> "SqliteConfigBuilder":
        pragmas = dict(self.pragmas)
        pragmas["cache_size"] = cache_size or 10000
        pragmas["mmap_size"] = mmap_size or 268435456
        return self._with(pragmas=tuple(pragmas.items()))

    def build(self) -> PersistenceConfig:
        """Produce the configuration. No validation and no filesystem access."""
        return PersistenceConfig(
            storage_type="sqlite",
            sqlite=SqliteConfig(path=self.path, enable_wal=True, pragmas=dict(self.pragmas)),
            encryption=self.encryption,
            cache=self.cache,
            backup=self.backup,
        )

    def _with(self, **changes: object) -> "SqliteConfigBuilder":
        return replace(self, **changes)  # type: ignore[arg-type]

"""Per-scenario persistence presets."""

from collections.abc import Mapping

from ...constants import DAY_MS, HOUR_MS, MINUTE_MS
from ..config.BackupConfig import BackupConfig
from ..config.CacheConfig import CacheConfig
from ..config.Destination import CloudTarget, LocalPath
from ..config.EncryptionConfig import EncryptionConfig
from ..config.MongoConfig import MongoConfig
from ..config.PersistenceConfig import PersistenceConfig
from ..config.SqliteConfig import SqliteConfig
from ..config.SyncConfig import SyncConfig


def scenario_presets(environ: Mapping[str, str]) -> dict[str, PersistenceConfig]:
    """Build the deployment scenario presets.

    ``cloudNative`` takes its URI and backup bucket from ``MONGODB_ATLAS_URI``
    and ``BACKUP_BUCKET`` in ``environ``.
    """
    # Single developer, local SQLite only
    personal = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(path="./data/personal/ziwei.db"),
        cache=CacheConfig(enabled=True, max_size=30, ttl_ms=5 * MINUTE_MS),
    )

    # Shared SQLite with daily backups
    small_team = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(path="./data/team/ziwei.db"),
        encryption=EncryptionConfig(enabled=True),
        backup=BackupConfig(
            enabled=True,
            interval_ms=DAY_MS,
            retention_days=7,
            destination=LocalPath(path="./backups/"),
        ),
        cache=CacheConfig(enabled=True, max_size=100, ttl_ms=10 * MINUTE_MS),
    )

    enterprise = PersistenceConfig(
        storage_type="hybrid",
        sqlite=SqliteConfig(path="./data/enterprise/ziwei.db"),
        mongodb=MongoConfig(
            connection_string="mongodb://mongo-cluster:27017/ziwei_enterprise",
            options={
                "useUnifiedTopology": True,
                "maxPoolSize": 30,
                "serverSelectionTimeoutMS": 5000,
                "retryWrites": True,
                "w": "majority",
            },
        ),
        encryption=EncryptionConfig(enabled=True),
        sync=SyncConfig(enabled=True, interval_ms=3 * MINUTE_MS),
        cache=CacheConfig(enabled=True, max_size=300, ttl_ms=15 * MINUTE_MS),
        backup=BackupConfig(
            enabled=True,
            interval_ms=6 * HOUR_MS,
            retention_days=60,
            destination=LocalPath(path="./backups/"),
        ),
    )

    cloud_native = PersistenceConfig(
        storage_type="mongodb",
        mongodb=MongoConfig(
            connection_string=environ.get("MONGODB_ATLAS_URI", ""),
            options={
                "useUnifiedTopology": True,
                "maxPoolSize": 100,
                "serverSelectionTimeoutMS": 10000,
                "retryWrites": True,
                "w": "majority",
                "readPreference": "primaryPreferred",
            },
        ),
        encryption=EncryptionConfig(enabled=True),
        cache=CacheConfig(enabled=True, max_size=1000, ttl_ms=30 * MINUTE_MS),
        backup=BackupConfig(
            enabled=True,
            interval_ms=12 * HOUR_MS,
            retention_days=180,
            destination=CloudTarget(provider="aws-s3", bucket=environ.get("BACKUP_BUCKET") or None),
        ),
    )

    return {
        "personal": personal,
        "smallTeam": small_team,
        "enterprise": enterprise,
        "cloudNative": cloud_native,
    }

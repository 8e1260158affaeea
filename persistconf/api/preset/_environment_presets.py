"""Per-environment persistence presets."""

from collections.abc import Mapping

from ...constants import DAY_MS, HOUR_MS, MINUTE_MS
from ..config.BackupConfig import BackupConfig
from ..config.CacheConfig import CacheConfig
from ..config.Destination import CloudTarget, LocalPath
from ..config.EncryptionConfig import EncryptionConfig
from ..config.LogConfig import LogConfig
from ..config.MongoConfig import MongoConfig
from ..config.PersistenceConfig import PersistenceConfig
from ..config.SqliteConfig import SqliteConfig
from ..config.SyncConfig import SyncConfig

_PRODUCTION_MONGO_OPTIONS = {
    "useUnifiedTopology": True,
    "maxPoolSize": 20,
    "serverSelectionTimeoutMS": 5000,
    "socketTimeoutMS": 45000,
    "bufferMaxEntries": 0,
    "retryWrites": True,
    "w": "majority",
}

_CLOUD_MONGO_OPTIONS = {
    **_PRODUCTION_MONGO_OPTIONS,
    "maxPoolSize": 50,
    "serverSelectionTimeoutMS": 10000,
    "readPreference": "primaryPreferred",
}


def environment_presets(environ: Mapping[str, str]) -> dict[str, PersistenceConfig]:
    """Build the environment presets.

    Deployment secrets and cloud locations are read from ``environ``
    (``ENCRYPTION_KEY``, ``MONGODB_ATLAS_URI``, ``BACKUP_BUCKET``, ``BACKUP_REGION``).
    """
    encryption_key = environ.get("ENCRYPTION_KEY") or None

    development = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(path="./data/dev/ziwei.db"),
        cache=CacheConfig(enabled=True, max_size=50, ttl_ms=5 * MINUTE_MS),
        logging=LogConfig(level="debug", target=LocalPath(path="./logs/dev-persistence.log")),
    )

    # In-memory database, cache off so every read hits storage
    test = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(path=":memory:"),
        cache=CacheConfig(enabled=False),
        logging=LogConfig(level="error", target=LocalPath(path="./logs/test-persistence.log")),
    )

    production = PersistenceConfig(
        storage_type="hybrid",
        sqlite=SqliteConfig(path="./data/prod/ziwei.db"),
        mongodb=MongoConfig(
            connection_string="mongodb://localhost:27017/ziwei_prod",
            options=_PRODUCTION_MONGO_OPTIONS,
        ),
        encryption=EncryptionConfig(enabled=True, key=encryption_key),
        sync=SyncConfig(enabled=True, interval_ms=5 * MINUTE_MS),
        cache=CacheConfig(enabled=True, max_size=200, ttl_ms=10 * MINUTE_MS),
        backup=BackupConfig(
            enabled=True,
            interval_ms=DAY_MS,
            retention_days=30,
            destination=LocalPath(path="./backups/"),
        ),
        logging=LogConfig(level="info", target=LocalPath(path="./logs/prod-persistence.log")),
    )

    cloud = PersistenceConfig(
        storage_type="mongodb",
        mongodb=MongoConfig(
            connection_string=environ.get("MONGODB_ATLAS_URI", ""),
            options=_CLOUD_MONGO_OPTIONS,
        ),
        encryption=EncryptionConfig(enabled=True, key=encryption_key),
        sync=SyncConfig(enabled=False),
        cache=CacheConfig(enabled=True, max_size=500, ttl_ms=30 * MINUTE_MS),
        backup=BackupConfig(
            enabled=True,
            interval_ms=12 * HOUR_MS,
            retention_days=90,
            destination=CloudTarget(
                provider="aws-s3",
                bucket=environ.get("BACKUP_BUCKET") or None,
                region=environ.get("BACKUP_REGION") or None,
            ),
        ),
        logging=LogConfig(level="warn", target=CloudTarget(provider="cloudwatch", service="cloudwatch")),
    )

    return {
        "development": development,
        "test": test,
        "production": production,
        "cloud": cloud,
    }

"""SQLite tuning profiles for SQLite-only deployments."""

from collections.abc import Mapping

from ...constants import BASE_PRAGMAS, DAY_MS, MINUTE_MS, SQLITE_BACKUP_DIR, SQLITE_DATA_DIR
from ..config.BackupConfig import BackupConfig
from ..config.CacheConfig import CacheConfig
from ..config.Destination import LocalPath
from ..config.EncryptionConfig import EncryptionConfig
from ..config.LogConfig import LogConfig
from ..config.PersistenceConfig import PersistenceConfig
from ..config.SqliteConfig import SqliteConfig


def sqlite_profiles(environ: Mapping[str, str]) -> dict[str, PersistenceConfig]:
    """Build the SQLite tuning profiles (``basic``, ``development``, ``production``, ``performance``)."""
    basic = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(path=f"{SQLITE_DATA_DIR}/ziwei.db", pragmas=BASE_PRAGMAS),
        cache=CacheConfig(enabled=True, max_size=50, ttl_ms=5 * MINUTE_MS),
    )

    development = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(
            path=f"{SQLITE_DATA_DIR}/ziwei_dev.db",
            pragmas={**BASE_PRAGMAS, "cache_size": 3000},
        ),
        cache=CacheConfig(enabled=True, max_size=30, ttl_ms=3 * MINUTE_MS),
        logging=LogConfig(level="debug"),
    )

    production = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(
            path=f"{SQLITE_DATA_DIR}/ziwei_prod.db",
            pragmas={**BASE_PRAGMAS, "cache_size": 10000, "mmap_size": 268435456, "page_size": 4096},
        ),
        encryption=EncryptionConfig(enabled=True, key=environ.get("ENCRYPTION_KEY") or None),
        cache=CacheConfig(enabled=True, max_size=100, ttl_ms=10 * MINUTE_MS),
        backup=BackupConfig(
            enabled=True,
            interval_ms=DAY_MS,
            retention_days=7,
            destination=LocalPath(path=SQLITE_BACKUP_DIR),
        ),
        logging=LogConfig(level="info", target=LocalPath(path="./logs/audit.log")),
    )

    performance = PersistenceConfig(
        storage_type="sqlite",
        sqlite=SqliteConfig(
            path=f"{SQLITE_DATA_DIR}/ziwei_perf.db",
            pragmas={
                **BASE_PRAGMAS,
                "cache_size": 20000,
                "mmap_size": 536870912,
                "page_size": 4096,
                "wal_autocheckpoint": 1000,
                "optimize": None,
            },
        ),
        cache=CacheConfig(enabled=True, max_size=200, ttl_ms=30 * MINUTE_MS),
    )

    return {
        "basic": basic,
        "development": development,
        "production": production,
        "performance": performance,
    }

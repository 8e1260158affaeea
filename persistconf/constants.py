"""Shared constants for persistconf presets and builders."""

MINUTE_MS = 60_000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS

# SQLite-only deployments keep data and backups under these directories
SQLITE_DATA_DIR = "./data/sqlite"
SQLITE_BACKUP_DIR = "./backups/sqlite"

# PRAGMA values every SQLite profile starts from
BASE_PRAGMAS: dict[str, str | int | None] = {
    "journal_mode": "WAL",
    "synchronous": "NORMAL",
    "cache_size": 5000,
    "temp_store": "memory",
}

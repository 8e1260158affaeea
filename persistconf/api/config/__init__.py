"""Persistence configuration data model."""

from .BackupConfig import BackupConfig
from .CacheConfig import CacheConfig
from .ConfigError import (
    ConfigError,
    InvalidConfigurationError,
    NoHostError,
    UnknownProfileError,
    UnknownScenarioError,
)
from .Destination import CloudTarget, LocalPath
from .EncryptionConfig import EncryptionConfig
from .LogConfig import LogConfig
from .MongoConfig import MongoConfig
from .PersistenceConfig import STORAGE_TYPES, PersistenceConfig
from .SqliteConfig import SqliteConfig
from .SyncConfig import SyncConfig

__all__ = [
    "STORAGE_TYPES",
    "BackupConfig",
    "CacheConfig",
    "CloudTarget",
    "ConfigError",
    "EncryptionConfig",
    "InvalidConfigurationError",
    "LocalPath",
    "LogConfig",
    "MongoConfig",
    "NoHostError",
    "PersistenceConfig",
    "SqliteConfig",
    "SyncConfig",
    "UnknownProfileError",
    "UnknownScenarioError",
]

"""Build configurations from ad-hoc options, without presets."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from ..config.CacheConfig import CacheConfig
from ..config.EncryptionConfig import EncryptionConfig
from ..config.MongoConfig import MongoConfig
from ..config.PersistenceConfig import PersistenceConfig
from ..config.SqliteConfig import SqliteConfig
from ..config.SyncConfig import SyncConfig
from ..uri.ConnectionStringBuilder import DEFAULT_PORT, ConnectionStringBuilder
from .FactoryOptions import MongoOptions, SqliteOptions

DEFAULT_SQLITE_PATH = "./data/ziwei.db"
DEFAULT_SYNC_INTERVAL_MS = 300000

# Always present in a factory-built URI; caller options may override them
BASELINE_URI_OPTIONS: dict[str, str] = {
    "useUnifiedTopology": "true",
    "retryWrites": "true",
    "w": "majority",
}

OptionsT = TypeVar("OptionsT", bound=BaseModel)


def _coerce(model: type[OptionsT], options: OptionsT | Mapping[str, Any] | None) -> OptionsT:
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    return model.model_validate(dict(options))  # type: ignore[arg-type]


class ConfigFactory:
    """Single-backend and hybrid configurations built from scratch.

    Nothing here validates; pass results through `validate_config`.
    """

    @staticmethod
    def create_sqlite_config(options: SqliteOptions | Mapping[str, Any] | None = None) -> PersistenceConfig:
        opts = _coerce(SqliteOptions, options)
        cache = opts.cache_options()
        return PersistenceConfig(
            storage_type="sqlite",
            sqlite=SqliteConfig(path=opts.path or DEFAULT_SQLITE_PATH),
            encryption=EncryptionConfig(enabled=opts.encryption, key=opts.encryption_key),
            sync=SyncConfig(enabled=False),
            cache=CacheConfig(
                enabled=cache.enabled,
                max_size=cache.max_size or 50,
                ttl_ms=cache.ttl_ms or 300000,
            ),
        )

    @staticmethod
    def build_connection_string(options: MongoOptions | Mapping[str, Any] | None = None) -> str:
        """Assemble the URI for MongoDB options.

        Raises:
            NoHostError: If ``hosts`` is given but empty.
        """
        opts = _coerce(MongoOptions, options)
        builder = ConnectionStringBuilder()

        if opts.username and opts.password:
            builder = builder.set_credentials(opts.username, opts.password)

        if opts.hosts is None:
            builder = builder.add_host("localhost", DEFAULT_PORT)
        else:
            for host in opts.hosts:
                if isinstance(host, str):
                    builder = builder.add_host(host)
                else:
                    builder = builder.add_host(host.host, host.port)

        if opts.database:
            builder = builder.set_database(opts.database)

        for key, value in {**BASELINE_URI_OPTIONS, **opts.options}.items():
            builder = builder.add_option(key, value)

        return builder.build()

    @classmethod
    def create_mongo_config(cls, options: MongoOptions | Mapping[str, Any] | None = None) -> PersistenceConfig:
        """Build a MongoDB-only configuration.

        Raises:
            NoHostError: If ``hosts`` is given but empty.
        """
        opts = _coerce(MongoOptions, options)
        cache = opts.cache_options()
        return PersistenceConfig(
            storage_type="mongodb",
            mongodb=MongoConfig(
                connection_string=cls.build_connection_string(opts),
                options={
                    "useUnifiedTopology": True,
                    "maxPoolSize": opts.max_pool_size or 10,
                    "serverSelectionTimeoutMS": opts.timeout_ms or 5000,
                    "retryWrites": True,
                    "w": "majority",
                },
            ),
            encryption=EncryptionConfig(enabled=opts.encryption, key=opts.encryption_key),
            sync=SyncConfig(enabled=False),
            cache=CacheConfig(
                enabled=cache.enabled,
                max_size=cache.max_size or 100,
                ttl_ms=cache.ttl_ms or 600000,
            ),
        )

    @classmethod
    def create_hybrid_config(
        cls,
        sqlite_options: SqliteOptions | Mapping[str, Any] | None = None,
        mongo_options: MongoOptions | Mapping[str, Any] | None = None,
    ) -> PersistenceConfig:
        """Combine independently built SQLite and MongoDB configurations.

        Cache limits take the larger of the two, encryption is on when either
        option set asks for it, and sync is always enabled.
        """
        sqlite_opts = _coerce(SqliteOptions, sqlite_options)
        mongo_opts = _coerce(MongoOptions, mongo_options)
        sqlite_config = cls.create_sqlite_config(sqlite_opts)
        mongo_config = cls.create_mongo_config(mongo_opts)

        # Encryption follows the option sets, not the built configs
        return PersistenceConfig(
            storage_type="hybrid",
            sqlite=sqlite_config.sqlite,
            mongodb=mongo_config.mongodb,
            encryption=EncryptionConfig(
                enabled=sqlite_opts.encryption or mongo_opts.encryption,
                key=sqlite_opts.encryption_key or mongo_opts.encryption_key,
            ),
            sync=SyncConfig(enabled=True, interval_ms=sqlite_opts.sync_interval_ms or DEFAULT_SYNC_INTERVAL_MS),
            cache=CacheConfig(
                enabled=True,
                max_size=max(sqlite_config.cache.max_size, mongo_config.cache.max_size),
                ttl_ms=max(sqlite_config.cache.ttl_ms, mongo_config.cache.ttl_ms),
            ),
        )

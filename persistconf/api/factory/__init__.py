"""Preset-free configuration construction."""

from .ConfigFactory import ConfigFactory
from .FactoryOptions import CacheOptions, HostOption, MongoOptions, SqliteOptions
from .SqliteConfigBuilder import SqliteConfigBuilder

__all__ = ["CacheOptions", "ConfigFactory", "HostOption", "MongoOptions", "SqliteConfigBuilder", "SqliteOptions"]

"""Unit tests for persistconf.api.resolve.load_config and detect_environment."""

import logging

import pytest

from persistconf.api.config.ConfigError import InvalidConfigurationError
from persistconf.api.config.PersistenceConfig import PersistenceConfig
from persistconf.api.config.SqliteConfig import SqliteConfig
from persistconf.api.preset.PresetRegistry import PresetRegistry
from persistconf.api.resolve.detect_environment import detect_environment
from persistconf.api.resolve.load_config import load_config

pytestmark = pytest.mark.resolve


class TestDetectEnvironment:
    def test_default(self):
        assert detect_environment({}) == "development"

    def test_persistconf_env(self):
        assert detect_environment({"PERSISTCONF_ENV": "production"}) == "production"

    def test_app_env(self):
        assert detect_environment({"APP_ENV": "test"}) == "test"

    def test_persistconf_env_wins(self):
        assert detect_environment({"PERSISTCONF_ENV": "cloud", "APP_ENV": "test"}) == "cloud"

    def test_empty_value_skipped(self):
        assert detect_environment({"PERSISTCONF_ENV": "", "APP_ENV": "test"}) == "test"

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("PERSISTCONF_ENV", "test")
        assert detect_environment() == "test"


class TestLoadConfig:
    def test_development_by_default(self):
        config = load_config(environ={})
        assert config.storage_type == "sqlite"
        assert config.sqlite.path == "./data/dev/ziwei.db"

    def test_detected_environment(self):
        assert load_config(environ={"PERSISTCONF_ENV": "test"}).sqlite.path == ":memory:"

    def test_explicit_environment_beats_detection(self):
        assert load_config("test", environ={"PERSISTCONF_ENV": "production"}).sqlite.path == ":memory:"

    def test_overrides_applied(self):
        config = load_config(environ={"SQLITE_PATH": "/srv/app.db", "ENABLE_SYNC": "true"})
        assert config.sqlite.path == "/srv/app.db"
        assert config.sync.enabled is True

    def test_missing_key_tolerated_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="persistconf"):
            config = load_config(environ={"PERSISTCONF_ENV": "production"})
        assert config.storage_type == "hybrid"
        assert "MissingEncryptionKey" in caplog.text

    def test_missing_key_rejected_when_strict(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_config(environ={"PERSISTCONF_ENV": "production"}, strict=True)
        assert exc_info.value.validation.codes == ["MissingEncryptionKey"]

    def test_key_from_environment(self):
        config = load_config(environ={"PERSISTCONF_ENV": "production", "ENCRYPTION_KEY": "k"}, strict=True)
        assert config.encryption.key == "k"

    def test_cloud_without_uri_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_config(environ={"PERSISTCONF_ENV": "cloud"})
        assert exc_info.value.validation.codes == ["MissingConnectionString", "MissingEncryptionKey"]
        assert "Configuration validation error" in str(exc_info.value)

    def test_cloud_with_atlas_uri(self):
        environ = {
            "PERSISTCONF_ENV": "cloud",
            "MONGODB_ATLAS_URI": "mongodb+srv://cluster0.example.net/app",
            "ENCRYPTION_KEY": "k",
        }
        assert load_config(environ=environ).mongodb.connection_string == "mongodb+srv://cluster0.example.net/app"

    def test_invalid_storage_type_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            load_config(environ={"STORAGE_TYPE": "postgres"})

    def test_custom_registry(self):
        registry = PresetRegistry(
            environment_presets={
                "development": PersistenceConfig(storage_type="sqlite", sqlite=SqliteConfig(path="custom.db"))
            },
            scenario_presets={},
        )
        assert load_config("staging", environ={}, registry=registry).sqlite.path == "custom.db"

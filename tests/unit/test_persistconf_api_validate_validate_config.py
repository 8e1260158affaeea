"""Unit tests for persistconf.api.validate.validate_config module."""

import pytest

from persistconf.api.config.EncryptionConfig import EncryptionConfig
from persistconf.api.config.MongoConfig import MongoConfig
from persistconf.api.config.PersistenceConfig import PersistenceConfig
from persistconf.api.config.SqliteConfig import SqliteConfig
from persistconf.api.validate.validate_config import validate_config
from persistconf.api.validate.ValidationResult import ValidationResult

pytestmark = pytest.mark.validate


class TestValidateConfig:
    """Test the four consistency rules."""

    def test_valid_sqlite_config(self):
        config = PersistenceConfig(storage_type="sqlite", sqlite=SqliteConfig(path="./data/app.db"))
        result = validate_config(config)
        assert result.ok
        assert result.errors == ()

    def test_every_preset_except_secrets_is_consistent(self, registry):
        for name in ("development", "test"):
            assert validate_config(registry.get_environment_config(name)).ok
        assert validate_config(registry.get_scenario_config("personal")).ok

    def test_all_violations_reported(self):
        result = validate_config(
            {
                "storage_type": "bogus",
                "sqlite": {},
                "mongodb": {},
                "encryption": {"enabled": True, "key": ""},
            }
        )
        assert not result.ok
        assert len(set(result.codes)) >= 3
        assert result.codes == [
            "InvalidStorageType",
            "MissingSqlitePath",
            "MissingConnectionString",
            "MissingEncryptionKey",
        ]

    def test_invalid_storage_type_message(self):
        result = validate_config(PersistenceConfig(storage_type="postgres"))
        assert result.errors[0].startswith("InvalidStorageType:")
        assert "'postgres'" in result.errors[0]

    def test_sqlite_requires_path(self):
        result = validate_config(PersistenceConfig(storage_type="sqlite", sqlite=SqliteConfig()))
        assert result.codes == ["MissingSqlitePath"]

    def test_sqlite_requires_section(self):
        result = validate_config(PersistenceConfig(storage_type="sqlite"))
        assert result.codes == ["MissingSqlitePath"]

    def test_mongodb_requires_connection_string(self):
        result = validate_config(PersistenceConfig(storage_type="mongodb", mongodb=MongoConfig()))
        assert result.codes == ["MissingConnectionString"]

    def test_mongodb_does_not_require_sqlite(self):
        config = PersistenceConfig(storage_type="mongodb", mongodb=MongoConfig(connection_string="mongodb://h:1/d"))
        assert validate_config(config).ok

    def test_hybrid_requires_both(self):
        result = validate_config(PersistenceConfig(storage_type="hybrid"))
        assert result.codes == ["MissingSqlitePath", "MissingConnectionString"]

    def test_hybrid_valid(self):
        config = PersistenceConfig(
            storage_type="hybrid",
            sqlite=SqliteConfig(path="a.db"),
            mongodb=MongoConfig(connection_string="mongodb://h:1/d"),
        )
        assert validate_config(config).ok

    @pytest.mark.parametrize("key", [None, ""])
    def test_encryption_requires_key(self, key):
        config = PersistenceConfig(
            storage_type="sqlite",
            sqlite=SqliteConfig(path="a.db"),
            encryption=EncryptionConfig(enabled=True, key=key),
        )
        assert validate_config(config).codes == ["MissingEncryptionKey"]

    def test_disabled_encryption_needs_no_key(self):
        config = PersistenceConfig(
            storage_type="sqlite",
            sqlite=SqliteConfig(path="a.db"),
            encryption=EncryptionConfig(enabled=False),
        )
        assert validate_config(config).ok


class TestValidateConfigMalformedInput:
    """validate_config never raises."""

    def test_none(self):
        result = validate_config(None)
        assert result.codes == ["InvalidStorageType", "MissingSqlitePath", "MissingConnectionString"]

    def test_wrong_section_types(self):
        result = validate_config({"storage_type": "hybrid", "sqlite": "a.db", "mongodb": 42, "encryption": "yes"})
        assert result.codes == ["MissingSqlitePath", "MissingConnectionString"]

    def test_non_string_values(self):
        result = validate_config(
            {
                "storage_type": ["sqlite"],
                "sqlite": {"path": 1},
                "mongodb": {"connection_string": None},
                "encryption": {"enabled": True, "key": 123},
            }
        )
        assert result.codes == [
            "InvalidStorageType",
            "MissingSqlitePath",
            "MissingConnectionString",
            "MissingEncryptionKey",
        ]


class TestValidationResult:
    def test_ok_when_empty(self):
        assert ValidationResult().ok

    def test_codes(self):
        result = ValidationResult(errors=("A: first", "B: second"))
        assert not result.ok
        assert result.codes == ["A", "B"]

    def test_to_dict(self):
        assert ValidationResult(errors=("A: x",)).to_dict() == {"ok": False, "errors": ["A: x"]}

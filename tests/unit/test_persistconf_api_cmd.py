"""Unit tests for the cmd_* functions behind the CLI."""

import pytest

from persistconf.api.preset.cmd_list import cmd_list
from persistconf.api.preset.cmd_profile import cmd_profile
from persistconf.api.preset.cmd_scenario import cmd_scenario
from persistconf.api.resolve.cmd_show import cmd_show
from persistconf.api.uri.cmd_build import cmd_build
from persistconf.api.validate.cmd_validate import cmd_validate
from tests.conftest import run_cmd

pytestmark = pytest.mark.cli


class TestCmdBuild:
    def test_builds_uri(self):
        result = run_cmd(cmd_build, hosts=["a:1", "b:2"], database="d", options=["x=1", "y=2"])
        assert result.success is True
        assert result.output["uri"] == "mongodb://a:1,b:2/d?x=1&y=2"
        assert result.output["errors"] == []

    def test_credentials(self):
        result = run_cmd(cmd_build, hosts=["h"], user="u", password="p@ss")
        assert result.output["uri"] == "mongodb://u:p%40ss@h:27017/ziwei"
        assert result.output["warnings"] == []

    def test_lone_user_warns(self):
        result = run_cmd(cmd_build, hosts=["h"], user="u")
        assert result.success is True
        assert result.output["uri"] == "mongodb://h:27017/ziwei"
        assert result.output["warnings"] == ["Credentials ignored: user and password must both be given"]

    def test_no_hosts(self):
        result = run_cmd(cmd_build)
        assert result.success is False
        assert result.output["uri"] == ""
        assert "host" in result.output["errors"][0]
        assert result.errors == result.output["errors"]
        assert result.warnings == []

    def test_bad_option(self):
        result = run_cmd(cmd_build, hosts=["h"], options=["novalue"])
        assert result.success is False
        assert "key=value" in result.output["errors"][0]

    def test_bad_port(self):
        result = run_cmd(cmd_build, hosts=["h:port"])
        assert result.success is False
        assert "Invalid port" in result.output["errors"][0]

    def test_announce(self):
        assert cmd_build().announce == "Building connection string..."


class TestCmdList:
    def test_lists_all_tables(self):
        result = run_cmd(cmd_list)
        assert result.success is True
        assert result.output["environments"] == ["development", "test", "production", "cloud"]
        assert result.output["scenarios"] == ["personal", "smallTeam", "enterprise", "cloudNative"]
        assert result.output["sqlite_profiles"] == ["basic", "development", "production", "performance"]
        assert result.result == "Found 12 preset(s)"


class TestCmdShow:
    def test_detected_environment(self, monkeypatch):
        monkeypatch.setenv("PERSISTCONF_ENV", "test")
        result = run_cmd(cmd_show)
        assert result.output["environment"] == "test"
        assert result.output["content"]["sqlite"]["path"] == ":memory:"

    def test_overrides_listed(self, monkeypatch):
        monkeypatch.setenv("SQLITE_PATH", "/srv/app.db")
        monkeypatch.setenv("ENCRYPTION_KEY", "k")
        result = run_cmd(cmd_show, "production")
        assert result.output["overrides"] == ["encryption_key", "sqlite_path"]
        assert result.output["content"]["sqlite"]["path"] == "/srv/app.db"
        assert "k" not in result.output["overrides"]

    def test_unknown_environment_warns(self):
        result = run_cmd(cmd_show, "staging")
        assert result.success is True
        assert result.output["warnings"] == ["Unknown environment 'staging', using 'development' preset"]
        assert result.output["content"]["sqlite"]["path"] == "./data/dev/ziwei.db"


class TestCmdScenario:
    def test_known_scenario(self):
        result = run_cmd(cmd_scenario, "personal")
        assert result.success is True
        assert result.output["scenario"] == "personal"
        assert result.output["content"]["storage_type"] == "sqlite"

    def test_unknown_scenario(self):
        result = run_cmd(cmd_scenario, "doesNotExist")
        assert result.success is False
        assert result.output["content"] == {}
        assert "Unknown scenario" in result.output["errors"][0]

    def test_overrides_applied_on_request(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://cluster:27017/e")
        plain = run_cmd(cmd_scenario, "enterprise")
        applied = run_cmd(cmd_scenario, "enterprise", apply_overrides=True)
        assert plain.output["content"]["mongodb"]["connection_string"] != "mongodb://cluster:27017/e"
        assert applied.output["content"]["mongodb"]["connection_string"] == "mongodb://cluster:27017/e"


class TestCmdValidate:
    def test_valid(self):
        result = run_cmd(cmd_validate, "development")
        assert result.success is True
        assert result.output["valid"] is True
        assert result.output["storage_type"] == "sqlite"

    def test_invalid(self):
        result = run_cmd(cmd_validate, "production")
        assert result.success is False
        assert result.output["valid"] is False
        assert result.output["errors"][0].startswith("MissingEncryptionKey")
        assert result.result == "Configuration for 'production' has 1 problem(s)"

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENCRYPTION_KEY", "k")
        assert run_cmd(cmd_validate, "production").success is True

    def test_invalid_storage_type_override(self, monkeypatch):
        monkeypatch.setenv("STORAGE_TYPE", "postgres")
        result = run_cmd(cmd_validate, "development")
        assert result.output["storage_type"] == "postgres"
        assert result.output["errors"][0].startswith("InvalidStorageType")


class TestCmdProfile:
    def test_named_profile(self):
        result = run_cmd(cmd_profile, "development")
        assert result.success is True
        assert result.output["profile"] == "development"
        assert result.output["detected"] is False
        assert result.output["content"]["sqlite"]["pragmas"]["cache_size"] == 3000

    def test_detected_profile(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        result = run_cmd(cmd_profile)
        assert result.output["profile"] == "production"
        assert result.output["detected"] is True
        assert result.warnings[0].startswith("MissingEncryptionKey")

    def test_default_profile(self):
        assert run_cmd(cmd_profile).output["profile"] == "basic"

    def test_overrides_applied_on_request(self, monkeypatch):
        monkeypatch.setenv("SQLITE_PATH", "/srv/basic.db")
        assert run_cmd(cmd_profile, "basic").output["content"]["sqlite"]["path"] == "./data/sqlite/ziwei.db"
        assert run_cmd(cmd_profile, "basic", apply_overrides=True).output["content"]["sqlite"]["path"] == "/srv/basic.db"

    def test_unknown_profile(self):
        result = run_cmd(cmd_profile, "turbo")
        assert result.success is False
        assert result.output["content"] == {}
        assert "Unknown SQLite profile" in result.errors[0]

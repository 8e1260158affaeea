"""Shared pytest configuration and fixtures for all tests."""

import logging

import pytest

from persistconf.api.preset.build_default_registry import build_default_registry
from persistconf.api.preset.PresetRegistry import PresetRegistry
from persistconf.api.resolve.ConfigResolver import ConfigResolver

# Variables that feed presets, overrides or environment detection
PERSISTCONF_ENV_VARS = (
    "STORAGE_TYPE",
    "SQLITE_PATH",
    "ENABLE_ENCRYPTION",
    "ENCRYPTION_KEY",
    "ENABLE_SYNC",
    "MONGODB_URI",
    "MONGODB_ATLAS_URI",
    "BACKUP_BUCKET",
    "BACKUP_REGION",
    "PERSISTCONF_ENV",
    "APP_ENV",
    "PERFORMANCE_MODE",
)


def pytest_configure(config):
    for marker in ("unit", "config", "uri", "validate", "preset", "resolve", "factory", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's shell environment out of every test."""
    for var in PERSISTCONF_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def registry() -> PresetRegistry:
    return build_default_registry()


@pytest.fixture
def resolver(registry: PresetRegistry) -> ConfigResolver:
    return ConfigResolver(registry)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def restore_root_logger():
    """Undo logging.basicConfig(force=True) calls made by the code under test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)

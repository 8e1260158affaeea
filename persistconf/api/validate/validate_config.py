"""Structural validation of a resolved persistence configuration."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from ..config.PersistenceConfig import STORAGE_BACKENDS, STORAGE_TYPES
from .ValidationResult import ValidationResult

ALL_BACKENDS: tuple[str, ...] = ("sqlite", "mongodb")


def _section(config: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = config.get(name)
    return value if isinstance(value, Mapping) else {}


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _validate_storage_type(storage_type: Any) -> list[str]:
    if storage_type in STORAGE_TYPES:
        return []
    return [
        f"InvalidStorageType: storage_type must be one of {list(STORAGE_TYPES)} "
        f"(found: {storage_type!r})"
    ]


def _validate_sqlite(config: Mapping[str, Any], required: tuple[str, ...]) -> list[str]:
    if "sqlite" not in required:
        return []
    path = _section(config, "sqlite").get("path")
    if _is_non_empty_str(path):
        return []
    return [
        f"MissingSqlitePath: sqlite.path is required for storage_type {config.get('storage_type')!r} "
        f"(found: {path!r}, expected: database file path)"
    ]


def _validate_mongodb(config: Mapping[str, Any], required: tuple[str, ...]) -> list[str]:
    if "mongodb" not in required:
        return []
    uri = _section(config, "mongodb").get("connection_string")
    if _is_non_empty_str(uri):
        return []
    return [
        f"MissingConnectionString: mongodb.connection_string is required for storage_type "
        f"{config.get('storage_type')!r} (found: {uri!r}, expected: MongoDB connection URI)"
    ]


def _validate_encryption(config: Mapping[str, Any]) -> list[str]:
    encryption = _section(config, "encryption")
    if encryption.get("enabled") is not True:
        return []
    key = encryption.get("key")
    if _is_non_empty_str(key):
        return []
    return ["MissingEncryptionKey: encryption.key is required when encryption.enabled is true"]


def validate_config(config: BaseModel | Mapping[str, Any] | Any) -> ValidationResult:
    """Check a configuration for internal consistency.

    Accepts a `PersistenceConfig` or a raw mapping with the same keys. Every
    independent violation is reported; nothing is raised, whatever the input.
    An unknown storage type is reported and both backend sections are still
    checked.

    Returns:
        ValidationResult with one entry per violation.
    """
    if isinstance(config, BaseModel):
        data: Mapping[str, Any] = config.model_dump()
    elif isinstance(config, Mapping):
        data = config
    else:
        data = {}

    storage_type = data.get("storage_type")
    # An unrecognized storage type cannot name its backends, so every backend is checked
    required = STORAGE_BACKENDS.get(storage_type, ALL_BACKENDS) if isinstance(storage_type, str) else ALL_BACKENDS

    errors: list[str] = []
    errors.extend(_validate_storage_type(storage_type))
    errors.extend(_validate_sqlite(data, required))
    errors.extend(_validate_mongodb(data, required))
    errors.extend(_validate_encryption(data))
    return ValidationResult(errors=tuple(errors))

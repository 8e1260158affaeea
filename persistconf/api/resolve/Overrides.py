"""Runtime override values sourced from environment variables."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Field name -> environment variable (ONLY place override variables are enumerated)
OVERRIDE_ENV_VARS: dict[str, str] = {
    "storage_type": "STORAGE_TYPE",
    "sqlite_path": "SQLITE_PATH",
    "enable_encryption": "ENABLE_ENCRYPTION",
    "encryption_key": "ENCRYPTION_KEY",
    "enable_sync": "ENABLE_SYNC",
    "mongodb_uri": "MONGODB_URI",
}


def _field(name: str, description: str):
    return Field(
        default=None,
        validation_alias=AliasChoices(name, OVERRIDE_ENV_VARS[name]),
        description=description,
    )


class Overrides(BaseModel):
    """Raw override strings; absent and empty values leave the preset untouched.

    Accepts either field names or environment variable names as keys.
    Scalar values are stringified (booleans as 'true'/'false'); any other
    non-string value is rejected with a ValidationError.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    storage_type: str | None = _field("storage_type", "Replaces storage_type")
    sqlite_path: str | None = _field("sqlite_path", "Replaces sqlite.path")
    enable_encryption: str | None = _field("enable_encryption", "'true' forces encryption.enabled on")
    encryption_key: str | None = _field("encryption_key", "Replaces encryption.key")
    enable_sync: str | None = _field("enable_sync", "'true' forces sync.enabled on")
    mongodb_uri: str | None = _field("mongodb_uri", "Replaces mongodb.connection_string")

    @field_validator("*", mode="before")
    @classmethod
    def stringify_scalars(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, int | float):
            return str(v)
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Overrides":
        """Read overrides from environment variables (default: the process environment)."""
        source = os.environ if environ is None else environ
        return cls.model_validate({var: source[var] for var in OVERRIDE_ENV_VARS.values() if var in source})

    @classmethod
    def coerce(cls, overrides: "Overrides | Mapping[str, str] | None") -> "Overrides":
        if overrides is None:
            return cls()
        if isinstance(overrides, Overrides):
            return overrides
        return cls.model_validate(dict(overrides))

    def present(self) -> dict[str, str]:
        """Override values that will take effect (non-empty strings)."""
        return {name: value for name, value in self.model_dump().items() if value}

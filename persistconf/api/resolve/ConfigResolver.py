"""Layer runtime overrides on top of preset configurations."""

import logging
from collections.abc import Mapping

from ..config.MongoConfig import MongoConfig
from ..config.PersistenceConfig import PersistenceConfig
from ..config.SqliteConfig import SqliteConfig
from ..preset.PresetRegistry import PresetRegistry
from .Overrides import Overrides

logger = logging.getLogger(__name__)

TRUE_LITERAL = "true"


def _flag(value: str | None) -> bool:
    """Only the literal 'true' switches a flag on; anything else counts as absent."""
    return value == TRUE_LITERAL


class ConfigResolver:
    """Resolve a preset plus overrides into a final `PersistenceConfig`.

    Precedence, highest first: non-empty override value, preset value.
    The resolver never validates and never raises for string or scalar
    override values (scalars are stringified); a list, dict or other value
    raises pydantic.ValidationError. Run `validate_config` on the result.
    """

    def __init__(self, registry: PresetRegistry):
        self.registry = registry

    def resolve(
        self,
        environment_name: str | None,
        overrides: Overrides | Mapping[str, str] | None = None,
    ) -> PersistenceConfig:
        """Resolve an environment preset (unknown names fall back to development)."""
        preset = self.registry.get_environment_config(environment_name)
        return self.apply_overrides(preset, overrides)

    def resolve_scenario(
        self,
        scenario_name: str,
        overrides: Overrides | Mapping[str, str] | None = None,
    ) -> PersistenceConfig:
        """Resolve a scenario preset.

        Raises:
            UnknownScenarioError: If the scenario is not registered.
        """
        preset = self.registry.get_scenario_config(scenario_name)
        return self.apply_overrides(preset, overrides)

    def resolve_profile(
        self,
        profile_name: str,
        overrides: Overrides | Mapping[str, str] | None = None,
    ) -> PersistenceConfig:
        """Resolve a SQLite tuning profile.

        Raises:
            UnknownProfileError: If the profile is not registered.
        """
        preset = self.registry.get_sqlite_profile(profile_name)
        return self.apply_overrides(preset, overrides)

    @staticmethod
    def apply_overrides(
        preset: PersistenceConfig,
        overrides: Overrides | Mapping[str, str] | None = None,
    ) -> PersistenceConfig:
        """Return a new config with every present override applied to ``preset``."""
        values = Overrides.coerce(overrides)
        update: dict[str, object] = {}

        if values.storage_type:
            update["storage_type"] = values.storage_type

        if values.sqlite_path:
            sqlite = preset.sqlite or SqliteConfig()
            update["sqlite"] = sqlite.model_copy(update={"path": values.sqlite_path})

        encryption_update: dict[str, object] = {}
        if _flag(values.enable_encryption):
            encryption_update["enabled"] = True
        if values.encryption_key:
            encryption_update["key"] = values.encryption_key
        if encryption_update:
            update["encryption"] = preset.encryption.model_copy(update=encryption_update)

        if _flag(values.enable_sync):
            update["sync"] = preset.sync.model_copy(update={"enabled": True})

        if values.mongodb_uri:
            mongodb = preset.mongodb or MongoConfig()
            update["mongodb"] = mongodb.model_copy(update={"connection_string": values.mongodb_uri})

        if update:
            logger.debug(f"Applying overrides to fields: {sorted(update)}")
        return preset.model_copy(update=update)
